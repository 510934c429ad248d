from pathlib import Path

import pytest


@pytest.fixture
def project_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Create a small project with a template file and two contributing files."""
    src = tmp_path / 'src'
    src.mkdir()
    (src / 'main.c').write_text(
        'int main() {\n'
        '  // @block_default ITEMS\n'
        '  //   item_default();\n'
        '  item_default();\n'
        '  // @endblock\n'
        '  return 0;\n'
        '}\n',
        encoding='utf-8',
    )
    (src / 'plugin_a.c').write_text(
        '// @block_append ITEMS\n//   item_a();\n',
        encoding='utf-8',
    )
    (src / 'plugin_b.c').write_text(
        '// @block_append ITEMS\n//   item_b();\n',
        encoding='utf-8',
    )
    monkeypatch.chdir(tmp_path)
    return tmp_path


MERGED_MAIN = (
    'int main() {\n'
    '  // @block_default ITEMS\n'
    '  //   item_default();\n'
    '  item_default();\n'
    '  item_a();\n'
    '  item_b();\n'
    '  // @endblock\n'
    '  return 0;\n'
    '}\n'
)


@pytest.fixture
def merged_main() -> str:
    return MERGED_MAIN
