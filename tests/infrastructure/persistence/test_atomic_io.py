from pathlib import Path

from gnustep_setup.infrastructure.persistence.atomic_io import append_line, atomic_write


class TestAtomicWrite:
    async def test_creates_parent_dirs_and_writes(self, tmp_path: Path) -> None:
        target = tmp_path / "conf.d" / "gnustep.fish"

        await atomic_write(target, "set -gx A b\n")

        assert target.read_text() == "set -gx A b\n"
        assert target.stat().st_mode & 0o777 == 0o644
        assert [p.name for p in target.parent.iterdir()] == ["gnustep.fish"]

    async def test_replaces_existing_content(self, tmp_path: Path) -> None:
        target = tmp_path / "file.txt"
        target.write_text("old")

        await atomic_write(target, "new")

        assert target.read_text() == "new"


class TestAppendLine:
    async def test_appends_to_file_without_trailing_newline(self, tmp_path: Path) -> None:
        target = tmp_path / "profile"
        target.write_text("export A=1")

        await append_line(target, ". /GNUstep.sh")

        assert target.read_text() == "export A=1\n. /GNUstep.sh\n"

    async def test_creates_missing_file(self, tmp_path: Path) -> None:
        target = tmp_path / "profile"

        await append_line(target, "line")

        assert target.read_text() == "line\n"
