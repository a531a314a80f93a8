"""
SceneGraph I/O Module

Handles project files and writing exports to disk.
"""

from .project_io import (
    ProjectFormatError, PROJECT_VERSION,
    component_to_dict, dict_to_component,
    save_scene, load_scene,
    export_xml, export_json, export_png
)

__all__ = [
    'ProjectFormatError', 'PROJECT_VERSION',
    'component_to_dict', 'dict_to_component',
    'save_scene', 'load_scene',
    'export_xml', 'export_json', 'export_png'
]
