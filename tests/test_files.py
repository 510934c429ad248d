from pathlib import Path

import pytest

from blockmerge.engine import Rewritten, SourceFile, Unchanged
from blockmerge.exceptions import FileAccessError
from blockmerge.files import discover_files, read_sources, write_outcomes


def _touch(path: Path, text: str = '') -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding='utf-8')
    return path


def test_discover_files_orders_by_pattern_then_name(tmp_path: Path) -> None:
    b = _touch(tmp_path / 'b.c')
    a = _touch(tmp_path / 'a.c')
    h = _touch(tmp_path / 'inc' / 'a.h')
    (tmp_path / 'dir.c').mkdir()

    found = discover_files(['**/*.h', '*.c', 'a.c'], root=tmp_path)
    assert found == [h.resolve(), a.resolve(), b.resolve()]


def test_discover_files_recursive_and_exclude(tmp_path: Path) -> None:
    keep = _touch(tmp_path / 'src' / 'deep' / 'keep.c')
    _touch(tmp_path / 'src' / 'vendor' / 'skip.c')

    found = discover_files(['src/**/*.c'], exclude=['src/vendor/*'], root=tmp_path)
    assert found == [keep.resolve()]


def test_discover_files_accepts_absolute_patterns(tmp_path: Path) -> None:
    target = _touch(tmp_path / 'x.c')
    assert discover_files([str(tmp_path / '*.c')], root=Path('/nonexistent')) == [target.resolve()]


def test_discover_files_defaults_to_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    target = _touch(tmp_path / 'x.c')
    monkeypatch.chdir(tmp_path)
    assert discover_files(['*.c']) == [target.resolve()]
    assert discover_files(['*.nothing']) == []


def test_read_sources_keeps_crlf(tmp_path: Path) -> None:
    path = tmp_path / 'win.c'
    path.write_bytes(b'a\r\nb\r\n')
    (source,) = read_sources([path])
    assert source == SourceFile(path=str(path), text='a\r\nb\r\n')


def test_read_sources_reports_undecodable_file(tmp_path: Path) -> None:
    path = tmp_path / 'binary.c'
    path.write_bytes(b'\xff\xfe\x00bad')
    with pytest.raises(FileAccessError, match='Cannot read'):
        read_sources([path])


def test_read_sources_reports_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileAccessError):
        read_sources([tmp_path / 'gone.c'])


def test_write_outcomes_only_writes_rewritten(tmp_path: Path) -> None:
    changed = _touch(tmp_path / 'changed.c', 'old\n')
    same = _touch(tmp_path / 'same.c', 'same\n')

    written = write_outcomes(
        [
            Rewritten(str(changed), 'new\r\n'),
            Unchanged(str(same)),
        ],
    )
    assert written == [changed]
    assert changed.read_bytes() == b'new\r\n'
    assert same.read_text(encoding='utf-8') == 'same\n'


def test_write_outcomes_reports_unwritable_path(tmp_path: Path) -> None:
    with pytest.raises(FileAccessError, match='Cannot write'):
        write_outcomes([Rewritten(str(tmp_path / 'missing' / 'x.c'), 'text')])
