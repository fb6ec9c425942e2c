"""Exporters: XYZ coordinate lists, OBJ meshes, and X3D scene graphs."""

from kekule.export.obj import export_obj, write_obj
from kekule.export.request import (
    ExportFormat,
    ExportRequest,
    ExportResult,
    run_export,
)
from kekule.export.x3d import (
    Appearance,
    BondGroup,
    CylinderNode,
    SceneNode,
    SphereNode,
    export_x3d,
    scene_nodes,
    write_x3d,
)
from kekule.export.xyz import write_xyz

__all__ = [
    "Appearance",
    "BondGroup",
    "CylinderNode",
    "ExportFormat",
    "ExportRequest",
    "ExportResult",
    "SceneNode",
    "SphereNode",
    "export_obj",
    "export_x3d",
    "run_export",
    "scene_nodes",
    "write_obj",
    "write_x3d",
    "write_xyz",
]
