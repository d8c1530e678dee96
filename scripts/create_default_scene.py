#!/usr/bin/env python3
"""Create the default hello-world scene: a box dropped onto a ground plane."""
import argparse
from pathlib import Path

from mjhello.types import ShapeType
from mjhello.pipeline.scene_builder import SceneBuilder

DEFAULT_OUTPUT = Path(__file__).parent.parent / "models" / "hello_world.xml"

def create_default_scene() -> SceneBuilder:
    """Ground plane plus a free box, which becomes body 1."""
    builder = SceneBuilder(model_name="hello_world", timestep=0.002)
    builder.add_ground(half_size=5.0)
    builder.add_body(
        name="box",
        position=[0, 0, 1],
        shape_type=ShapeType.BOX,
        shape_params=[0.1, 0.1, 0.1],
        mass=1.0
    )
    return builder

def main():
    """Generate and save the default scene."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--output", type=str, default=str(DEFAULT_OUTPUT),
                        help=f"Where to write the MJCF file (default: {DEFAULT_OUTPUT})")
    args = parser.parse_args()
    
    builder = create_default_scene()
    output_path = builder.save(Path(args.output))
    
    print(f"Created default scene: {output_path}")
    print(f"  Bodies: {builder.count()} (world + box)")
    print(f"  Joints: {builder.joint_count}, DOFs: {builder.dof_count}")

if __name__ == "__main__":
    main()
