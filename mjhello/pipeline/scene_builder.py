import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Optional

import numpy as np

from ..types import ShapeType
from .file_operations import save_text_file

# Velocity coordinates contributed by each joint type.
JOINT_DOFS = {"free": 6, "ball": 3, "hinge": 1, "slide": 1}


def _format_vector(values) -> str:
    return " ".join(f"{float(v):g}" for v in values)


def _as_vector(values, size: int, description: str) -> np.ndarray:
    vector = np.array(values, dtype=np.float64)
    if vector.shape != (size,):
        raise ValueError(f"{description} must be a {size}D vector")
    return vector


class SceneBuilder:
    """Composes small MJCF scenes and tracks the counts MuJoCo will report.
    
    Body 0 is always the implicit world body, so ``count()`` starts at 1.
    """
    
    def __init__(self, model_name: str = "hello_world", timestep: float = 0.002,
                 gravity: Optional[np.ndarray] = None):
        if timestep <= 0:
            raise ValueError("Timestep must be positive")
        
        self.model_name = model_name
        self.timestep = float(timestep)
        self.gravity = _as_vector([0, 0, -9.81] if gravity is None else gravity, 3, "Gravity")
        
        self._root = ET.Element("mujoco", model=model_name)
        ET.SubElement(self._root, "option",
                      timestep=f"{self.timestep:g}", gravity=_format_vector(self.gravity))
        self._worldbody = ET.SubElement(self._root, "worldbody")
        
        self.body_names: list[str] = []
        self.joint_types: list[str] = []
        self.geom_count = 0
    
    def count(self) -> int:
        return 1 + len(self.body_names)
    
    @property
    def joint_count(self) -> int:
        return len(self.joint_types)
    
    @property
    def dof_count(self) -> int:
        return sum(JOINT_DOFS[joint_type] for joint_type in self.joint_types)
    
    def add_ground(self, half_size: float = 5.0, name: str = "ground") -> 'SceneBuilder':
        if half_size <= 0:
            raise ValueError("Ground size must be positive")
        
        ET.SubElement(self._worldbody, "geom", name=name, type="plane",
                      size=_format_vector([half_size, half_size, 0.1]))
        self.geom_count += 1
        return self
    
    def add_body(self, name: str, position: np.ndarray, shape_type: ShapeType,
                 shape_params: np.ndarray, mass: float = 1.0,
                 orientation: Optional[np.ndarray] = None,
                 free: bool = True) -> 'SceneBuilder':
        """Add a body under the world body, with a free joint unless ``free`` is False."""
        self._check_name(name)
        position = _as_vector(position, 3, "Position")
        size = self._shape_size(shape_type, shape_params)
        
        if mass <= 0:
            raise ValueError("Mass must be positive")
        
        attributes = {"name": name, "pos": _format_vector(position)}
        if orientation is not None:
            orientation = _as_vector(orientation, 4, "Orientation [w, x, y, z]")
            norm = np.linalg.norm(orientation)
            if norm == 0:
                raise ValueError("Orientation must be a non-zero quaternion")
            attributes["quat"] = _format_vector(orientation / norm)
        
        body = ET.SubElement(self._worldbody, "body", **attributes)
        if free:
            ET.SubElement(body, "joint", name=f"{name}_free", type="free")
            self.joint_types.append("free")
        ET.SubElement(body, "geom", type=shape_type.mjcf_name, size=size, mass=f"{float(mass):g}")
        
        self.body_names.append(name)
        self.geom_count += 1
        return self
    
    def add_pendulum(self, name: str, anchor: np.ndarray, n_links: int = 1,
                     link_length: float = 0.5, radius: float = 0.05,
                     axis: Optional[np.ndarray] = None) -> 'SceneBuilder':
        """Add a chain of capsule links connected by hinge joints, hanging from ``anchor``."""
        anchor = _as_vector(anchor, 3, "Anchor")
        axis = _as_vector([0, 1, 0] if axis is None else axis, 3, "Axis")
        
        if n_links < 1:
            raise ValueError("Pendulum needs at least one link")
        if link_length <= 0 or radius <= 0:
            raise ValueError("Link length and radius must be positive")
        
        parent = self._worldbody
        position = anchor
        for i in range(n_links):
            link_name = f"{name}_{i}"
            self._check_name(link_name)
            
            link = ET.SubElement(parent, "body", name=link_name, pos=_format_vector(position))
            ET.SubElement(link, "joint", name=f"{link_name}_hinge", type="hinge",
                          axis=_format_vector(axis))
            ET.SubElement(link, "geom", type="capsule", size=f"{radius:g}",
                          fromto=_format_vector([0, 0, 0, 0, 0, -link_length]))
            
            self.body_names.append(link_name)
            self.joint_types.append("hinge")
            self.geom_count += 1
            
            parent = link
            position = np.array([0.0, 0.0, -link_length])
        
        return self
    
    def to_xml(self) -> str:
        tree = ET.ElementTree(self._root)
        ET.indent(tree, space="  ")
        return ET.tostring(self._root, encoding="unicode") + "\n"
    
    def save(self, filepath: Path) -> Path:
        return save_text_file(self.to_xml(), filepath)
    
    def _check_name(self, name: str) -> None:
        if not name:
            raise ValueError("Body name must not be empty")
        if name in self.body_names:
            raise ValueError(f"Duplicate body name: {name}")
    
    @staticmethod
    def _shape_size(shape_type: ShapeType, shape_params) -> str:
        if not isinstance(shape_type, ShapeType):
            raise ValueError("Shape type must be a ShapeType enum value")
        
        shape_params = _as_vector(shape_params, 3, "Shape params")
        if shape_type == ShapeType.SPHERE:
            size = shape_params[:1]
        elif shape_type == ShapeType.CAPSULE:
            size = shape_params[:2]
        else:
            size = shape_params
        
        if np.any(size <= 0):
            raise ValueError(f"{shape_type.name.title()} dimensions must be positive")
        return _format_vector(size)
