"""Test functions read_operations and extract_archive."""
import tarfile
import zipfile

import py7zr
import pytest

from recycling_calculator.batch.reader import extract_archive, read_operations


def test_read_plain_text(tmp_path) -> None:
    """A .txt file is read directly."""
    txt = tmp_path / "requests.txt"
    txt.write_text("1 | 2 | add\n")
    assert read_operations(txt) == "1 | 2 | add\n"


def test_extract_zip(tmp_path) -> None:
    """Check that a .zip archive can be extracted and read correctly."""
    txt = tmp_path / "requests.txt"
    txt.write_text("3 | 3 | add\n")

    zip_path = tmp_path / "requests.zip"
    with zipfile.ZipFile(zip_path, "w") as zf:
        zf.write(txt, arcname="requests.txt")

    assert read_operations(zip_path) == "3 | 3 | add\n"


def test_extract_tar_xz(tmp_path) -> None:
    """Check that a .tar.xz archive can be extracted and read correctly."""
    txt = tmp_path / "requests.txt"
    txt.write_text("4 | 4 | multiply\n")

    tar_path = tmp_path / "requests.tar.xz"
    with tarfile.open(tar_path, "w:xz") as tf:
        tf.add(txt, arcname="requests.txt")

    assert extract_archive(tar_path) == "4 | 4 | multiply\n"


def test_extract_7z(tmp_path) -> None:
    """Check that a .7z archive can be extracted and read correctly."""
    txt = tmp_path / "requests.txt"
    txt.write_text("5 | 2 | minus\n")

    archive_path = tmp_path / "requests.7z"
    with py7zr.SevenZipFile(archive_path, "w") as archive:
        archive.write(txt, arcname="requests.txt")

    assert extract_archive(archive_path) == "5 | 2 | minus\n"


def test_extract_archive_no_txt(tmp_path) -> None:
    """Verify that extraction fails if no .txt file exists in the archive."""
    zip_path = tmp_path / "empty.zip"
    with zipfile.ZipFile(zip_path, "w") as zf:
        zf.writestr("data.bin", b"\x00\x01")

    with pytest.raises(ValueError, match="No .txt file"):
        extract_archive(zip_path)


def test_extract_unsupported_format(tmp_path) -> None:
    """Ensure unsupported archive formats raise a ValueError."""
    file_path = tmp_path / "requests.rar"
    file_path.write_text("1 | 1")

    with pytest.raises(ValueError, match="Unsupported archive format"):
        read_operations(file_path)
