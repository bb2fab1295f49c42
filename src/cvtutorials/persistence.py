"""Reading and writing data with cv2.FileStorage (XML, YAML or JSON).

The file format is owned by OpenCV and chosen from the file extension. This
module only validates paths, guarantees that storages get released, and
knows the layout of the files the lessons read and write.
"""

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Callable, Iterator

import cv2
import numpy as np

from cvtutorials.structs import BorderSettings, Point
from cvtutorials.utils import check_file_extension

FILE_STORAGE_EXTENSIONS = ("xml", "yml", "yaml", "json", "gz")

DEMO_FILE_TYPES = ["XML", "YML", "YAML", "JSON", "GZ"]
DEMO_IMAGE_FORMATS = ["jpg", "tiff", "jpg", "webp", "jp2"]


class FileStorageError(RuntimeError):
    """A file storage could not be opened or does not have the expected
    structure."""


@contextmanager
def open_file_storage(path: str | Path, mode: int) -> Iterator[cv2.FileStorage]:
    """Open a file storage for reading or writing and release it on exit.

    The mode is cv2.FILE_STORAGE_READ or cv2.FILE_STORAGE_WRITE.
    """
    check_file_extension(path, FILE_STORAGE_EXTENSIONS)
    verb = "writing" if mode & cv2.FILE_STORAGE_WRITE else "reading"
    try:
        fs = cv2.FileStorage(str(path), mode)
    except cv2.error as e:
        raise FileStorageError(f"Could not open {path} for {verb}.") from e
    if not fs.isOpened():
        raise FileStorageError(f"Could not open {path} for {verb}.")
    logging.debug(f"Opened {path} for {verb}.")
    try:
        yield fs
    finally:
        fs.release()


def _node_value(node: cv2.FileNode) -> Any:
    if node.isString():
        return node.string()
    if node.isInt():
        return int(node.real())
    return node.real()


def read_sequence(node: cv2.FileNode, cast: Callable[[Any], Any] = float) -> list:
    """Read every element of a sequence node."""
    if not node.isSeq():
        raise FileStorageError(f"Node '{node.name()}' is not a sequence.")
    return [cast(_node_value(node.at(i))) for i in range(node.size())]


def _write_flow_sequence(fs: cv2.FileStorage, name: str, values: list[int]) -> None:
    fs.startWriteStruct(name, cv2.FileNode_SEQ | cv2.FileNode_FLOW)
    for value in values:
        fs.write("", int(value))
    fs.endWriteStruct()


def write_demo_data(path: str | Path, developer: str = "Rodney") -> None:
    """Write one example of each kind of data a file storage can hold."""
    with open_file_storage(path, cv2.FILE_STORAGE_WRITE) as fs:
        fs.startWriteStruct("File_Properties", cv2.FileNode_MAP)
        fs.write("File_Path", str(path))
        fs.write("File_Name", Path(path).name)
        fs.endWriteStruct()

        fs.write("Name_of_Developer", developer)
        fs.write("No_of_file_types", len(DEMO_FILE_TYPES))
        fs.write("File_Types", DEMO_FILE_TYPES)
        fs.write("Matrix", np.array([[2, 4], [6, 8]], dtype=np.float64))
        _write_flow_sequence(fs, "Point_Cordinates", [23, 78])
        fs.write(
            "Dense_Array",
            np.array([[2.34, 1.245], [6.09, 4.56], [9.07, 1.234]], dtype=np.float32),
        )
        fs.write("ImageFormats", DEMO_IMAGE_FORMATS)
    logging.info(f"Wrote demo data to {path}.")


def read_demo_data(path: str | Path) -> dict[str, Any]:
    """Read back a file written by write_demo_data()."""
    with open_file_storage(path, cv2.FILE_STORAGE_READ) as fs:
        properties = fs.getNode("File_Properties")
        if not properties.isMap():
            raise FileStorageError("File_Properties is not a map.")
        point = read_sequence(fs.getNode("Point_Cordinates"), int)
        return {
            "File_Properties": {
                "File_Path": properties.getNode("File_Path").string(),
                "File_Name": properties.getNode("File_Name").string(),
            },
            "Name_of_Developer": fs.getNode("Name_of_Developer").string(),
            "No_of_file_types": int(fs.getNode("No_of_file_types").real()),
            "File_Types": read_sequence(fs.getNode("File_Types"), str),
            "Matrix": fs.getNode("Matrix").mat(),
            "Point_Cordinates": Point(*point),
            "Dense_Array": fs.getNode("Dense_Array").mat(),
            "ImageFormats": read_sequence(fs.getNode("ImageFormats"), str),
        }


def _read_corner(roi: cv2.FileNode, name: str) -> Point:
    node = roi.getNode(name)
    if not node.isSeq():
        raise FileStorageError(f"ROI '{name}' is not a sequence.")
    coords = read_sequence(node, int)
    if len(coords) < 2:
        raise FileStorageError(f"ROI '{name}' needs 2 coordinates, got {coords}.")
    return Point(coords[0], coords[1])


def read_border_settings(path: str | Path) -> BorderSettings:
    """Read the inputs for adding a border around a region of interest."""
    with open_file_storage(path, cv2.FILE_STORAGE_READ) as fs:
        image_path = fs.getNode("SourceImagePath").string()
        roi = fs.getNode("ROI")
        if not roi.isMap():
            raise FileStorageError("ROI is not a map.")
        top_left = _read_corner(roi, "top-left-corner-coordinates")
        bottom_right = _read_corner(roi, "bottom-right-corner-coordinates")
        sizes = fs.getNode("BorderSize")
        if not sizes.isMap():
            raise FileStorageError("BorderSize is not a map.")
        return BorderSettings(
            image_path=image_path,
            top_left=top_left,
            bottom_right=bottom_right,
            top=int(sizes.getNode("top").real()),
            bottom=int(sizes.getNode("bottom").real()),
            left=int(sizes.getNode("left").real()),
            right=int(sizes.getNode("right").real()),
            border_type=int(fs.getNode("BorderType").real()),
            constant_value=fs.getNode("ConstantValue").real(),
        )


def write_border_settings(path: str | Path, settings: BorderSettings) -> None:
    """Write the inputs for adding a border around a region of interest."""
    with open_file_storage(path, cv2.FILE_STORAGE_WRITE) as fs:
        fs.write("SourceImagePath", settings.image_path)
        fs.startWriteStruct("ROI", cv2.FileNode_MAP)
        _write_flow_sequence(
            fs, "top-left-corner-coordinates", list(settings.top_left.as_tuple())
        )
        _write_flow_sequence(
            fs,
            "bottom-right-corner-coordinates",
            list(settings.bottom_right.as_tuple()),
        )
        fs.endWriteStruct()
        fs.startWriteStruct("BorderSize", cv2.FileNode_MAP)
        fs.write("top", int(settings.top))
        fs.write("bottom", int(settings.bottom))
        fs.write("left", int(settings.left))
        fs.write("right", int(settings.right))
        fs.endWriteStruct()
        fs.write("BorderType", int(settings.border_type))
        fs.write("ConstantValue", float(settings.constant_value))
