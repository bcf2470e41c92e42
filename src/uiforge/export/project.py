"""
Export of generated code: a single component file or a zipped starter project.
"""

import zipfile
from pathlib import Path
from typing import Dict, Optional

from uiforge.codegen import FILE_EXTENSIONS, sanitize_component_name, serialize
from uiforge.exceptions import StorageError
from uiforge.logging_config import logger
from uiforge.schemas import ExportOptions, Flavor, Forest

from . import templates


def flavor_for(options: ExportOptions) -> Flavor:
    """jsx exports the loose flavor; tsx and project export the typed one."""
    return "loose" if options.format == "jsx" else "typed"


def component_filename(options: ExportOptions) -> str:
    name = sanitize_component_name(options.component_name)
    return f"{name}.{FILE_EXTENSIONS[flavor_for(options)]}"


def export_to_file(code: str, path: Path) -> Path:
    """
    Write one component file.

    Raises:
        StorageError: the file could not be written
    """
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(code, encoding="utf-8")
    except OSError as e:
        raise StorageError(str(path), str(e)) from e
    logger.info(f"Exported component to {path}")
    return path


def project_files(forest: Forest, options: ExportOptions) -> Dict[str, str]:
    """
    Archive member name -> text for a starter project.
    """
    name = sanitize_component_name(options.component_name)
    code = serialize(
        forest,
        flavor=flavor_for(options),
        component_name=name,
        include_imports=options.include_imports,
    )
    return {
        f"src/components/{component_filename(options)}": code,
        "package.json": templates.package_json(),
        "tailwind.config.js": templates.TAILWIND_CONFIG,
        "postcss.config.js": templates.POSTCSS_CONFIG,
        "src/globals.css": templates.GLOBALS_CSS,
        "README.md": templates.readme(name),
    }


def export_project(forest: Forest, options: ExportOptions, destination: Path) -> Path:
    """
    Write a zip archive with the component and a minimal build setup.

    Args:
        forest: Document to export
        options: Export options (format "project" exports the typed flavor)
        destination: Zip file path, or a directory to place <Name>-project.zip in

    Returns:
        Path of the written archive

    Raises:
        StorageError: the archive could not be written
    """
    destination = Path(destination)
    if destination.suffix.lower() != ".zip":
        destination = destination / f"{sanitize_component_name(options.component_name)}-project.zip"

    files = project_files(forest, options)
    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        with zipfile.ZipFile(destination, "w", compression=zipfile.ZIP_DEFLATED) as archive:
            for member, text in files.items():
                archive.writestr(member, text)
    except OSError as e:
        raise StorageError(str(destination), str(e)) from e

    logger.info(f"Exported project ({len(files)} files) to {destination}")
    return destination


def export_document(forest: Forest, options: ExportOptions, destination: Path,
           code: Optional[str] = None) -> Path:
    """
    Export according to options.format.

    For jsx/tsx a directory destination receives <Name>.<ext>; pre-generated
    code may be passed to skip serialization.
    """
    if options.format == "project":
        return export_project(forest, options, destination)

    destination = Path(destination)
    if destination.is_dir() or not destination.suffix:
        destination = destination / component_filename(options)
    if code is None:
        code = serialize(
            forest,
            flavor=flavor_for(options),
            component_name=options.component_name,
            include_imports=options.include_imports,
        )
    return export_to_file(code, destination)
