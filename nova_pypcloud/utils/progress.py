"""Progress bar utilities for nova-pypcloud."""

from typing import BinaryIO, Optional, Union

from tqdm import tqdm


def create_progress_bar(
    total: int,
    desc: str = "",
    unit: str = "B",
    unit_scale: bool = True,
    unit_divisor: int = 1024,
    disable: bool = False,
    leave: bool = True,
    miniters: Union[int, float] = 1,
) -> tqdm:
    """Create a progress bar for reading or sending file content.

    Args:
        total: Total amount of units to process.
        desc: Description to display next to the progress bar.
        unit: String that will be used to define the unit of each iteration.
        unit_scale: Whether to scale the units automatically.
        unit_divisor: Unit divisor for scaling (default: 1024 for bytes).
        disable: Whether to disable the entire progress bar.
        leave: Whether to leave the progress bar after completion.
        miniters: Minimum progress display update interval.

    Returns:
        A configured tqdm progress bar instance.
    """
    bar = tqdm(
        total=total,
        unit=unit,
        unit_scale=unit_scale,
        unit_divisor=unit_divisor,
        disable=disable,
        leave=leave,
        miniters=miniters,
        dynamic_ncols=True,
    )
    bar.set_description_str(desc)
    return bar


def format_size(size_bytes: int) -> str:
    """Format a byte count as a human readable string, e.g. ``1.50 KB``."""
    size = float(size_bytes)
    for unit in ["B", "KB", "MB", "GB", "TB"]:
        if size < 1024:
            return f"{size:.2f} {unit}"
        size /= 1024
    return f"{size:.2f} PB"


class ProgressReader:
    """Wrap a binary file so every read advances a progress bar.

    A read without a size (how requests consumes upload files) is served in
    ``chunk_size`` pieces so the bar moves while the body is built.
    """

    def __init__(self, fileobj: BinaryIO, progress_bar: tqdm, chunk_size: int):
        self._fileobj = fileobj
        self._progress_bar = progress_bar
        self._chunk_size = chunk_size

    def read(self, size: Optional[int] = -1) -> bytes:
        if size is not None and size >= 0:
            data = self._fileobj.read(size)
            self._progress_bar.update(len(data))
            return data
        chunks = []
        for chunk in iter(lambda: self._fileobj.read(self._chunk_size), b""):
            chunks.append(chunk)
            self._progress_bar.update(len(chunk))
        return b"".join(chunks)
