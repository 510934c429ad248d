from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from blockmerge.commands.apply import command as run_apply
from blockmerge.engine import Unchanged
from blockmerge.exceptions import MalformedDirectiveError, UnterminatedBlockError


def test_apply_rewrites_template_file(project_dir: Path, merged_main: str) -> None:
    result = run_apply(None, ['src/*.c'], check_only=False)

    assert result == 0
    assert (project_dir / 'src' / 'main.c').read_text(encoding='utf-8') == merged_main
    assert (project_dir / 'src' / 'plugin_a.c').read_text(encoding='utf-8') == '// @block_append ITEMS\n//   item_a();\n'


def test_apply_is_idempotent(project_dir: Path, mocker: MockerFixture) -> None:
    assert run_apply(None, ['src/*.c'], check_only=False) == 0

    write = mocker.patch('blockmerge.commands.apply.write_outcomes', return_value=[])
    assert run_apply(None, ['src/*.c'], check_only=True) == 0
    assert run_apply(None, ['src/*.c'], check_only=False) == 0
    (outcomes, _encoding), _ = write.call_args
    assert all(isinstance(outcome, Unchanged) for outcome in outcomes)


def test_check_mode_reports_without_writing(project_dir: Path, mocker: MockerFixture) -> None:
    main = project_dir / 'src' / 'main.c'
    before = main.read_text(encoding='utf-8')
    print_diffs = mocker.patch('blockmerge.commands.apply.rich_print_diffs')

    result = run_apply(None, ['src/*.c'], check_only=True)

    assert result == 2
    assert main.read_text(encoding='utf-8') == before
    (diffs,), _ = print_diffs.call_args
    assert [Path(path).name for path, _ in diffs] == ['main.c']
    assert '+  item_a();\n+  item_b();\n' in diffs[0][1]


def test_apply_uses_config_file(project_dir: Path, merged_main: str) -> None:
    config = project_dir / 'blockmerge.yaml'
    config.write_text('patterns:\n  - src/*.c\nexclude:\n  - src/plugin_b.c\n', encoding='utf-8')

    assert run_apply(config, [], check_only=False) == 0
    merged = (project_dir / 'src' / 'main.c').read_text(encoding='utf-8')
    assert merged == merged_main.replace('  item_b();\n', '')


def test_apply_without_matches_is_a_no_op(project_dir: Path) -> None:
    assert run_apply(None, ['nothing/*.c'], check_only=False) == 0


def test_malformed_directive_leaves_every_file_untouched(project_dir: Path) -> None:
    main = project_dir / 'src' / 'main.c'
    before = main.read_text(encoding='utf-8')
    (project_dir / 'src' / 'zz_bad.c').write_text('// @block_replace\n', encoding='utf-8')

    with pytest.raises(MalformedDirectiveError):
        run_apply(None, ['src/*.c'], check_only=False)
    assert main.read_text(encoding='utf-8') == before


def test_strict_endblock_from_config(project_dir: Path) -> None:
    (project_dir / 'src' / 'open.c').write_text('// @block ITEMS\nstale\n', encoding='utf-8')
    config = project_dir / 'blockmerge.yaml'
    config.write_text('strict_endblock: true\n', encoding='utf-8')

    with pytest.raises(UnterminatedBlockError):
        run_apply(config, ['src/*.c'], check_only=False)
