"""The shipped default scene and the script that regenerates it agree."""
import os
import subprocess
import sys
from pathlib import Path

import mujoco

from mjhello.types import ModelSummary

REPO_ROOT = Path(__file__).resolve().parents[2]
DEFAULT_MODEL = REPO_ROOT / "models" / "hello_world.xml"
SCRIPT = REPO_ROOT / "scripts" / "create_default_scene.py"


def test_default_model_layout():
    model = mujoco.MjModel.from_xml_path(str(DEFAULT_MODEL))
    assert ModelSummary.from_model(model) == ModelSummary(nbody=2, njnt=1, ngeom=2, nv=6, timestep=0.002)
    assert model.body(1).name == "box"


def test_script_regenerates_equivalent_scene(tmp_path):
    output = tmp_path / "scene.xml"
    result = subprocess.run(
        [sys.executable, str(SCRIPT), "--output", str(output)],
        capture_output=True,
        text=True,
        cwd=REPO_ROOT,
        env={**os.environ, "PYTHONPATH": str(REPO_ROOT)},
    )
    assert result.returncode == 0, result.stderr
    assert "Bodies: 2 (world + box)" in result.stdout
    
    generated = mujoco.MjModel.from_xml_path(str(output))
    shipped = mujoco.MjModel.from_xml_path(str(DEFAULT_MODEL))
    assert ModelSummary.from_model(generated) == ModelSummary.from_model(shipped)
