from blockmerge.directives import scan_file
from blockmerge.engine import (
    BlockRegistry,
    LineEdit,
    Rewritten,
    Unchanged,
    apply_edits,
    patch_file,
)
from blockmerge.engine.patcher import existing_indent, preserved_template_lines


def test_apply_edits_uses_original_indices() -> None:
    lines = ['a', 'b', 'c', 'd', 'e']
    edits = [
        LineEdit(start=1, end=2, lines=('B1', 'B2', 'B3')),
        LineEdit(start=3, end=5, lines=()),
    ]
    assert apply_edits(lines, edits) == ['a', 'B1', 'B2', 'B3', 'c']
    assert lines == ['a', 'b', 'c', 'd', 'e']


def test_existing_indent_skips_comments_and_blanks() -> None:
    assert existing_indent(['  // note', '', '\t  code();']) == '\t  '
    assert existing_indent(['// only comments']) == ''
    assert existing_indent([]) == ''


def test_preserved_template_lines() -> None:
    span = [
        '  //   template();',
        '  //     nested();',
        '  generated();',
        '  //   not preserved',
    ]
    assert preserved_template_lines(span, '  // ') == span[:2]


def test_preserved_template_lines_stop_at_blank_comment_and_directive() -> None:
    assert preserved_template_lines(['// a', '//', '// b'], '// ') == ['// a']
    assert preserved_template_lines(['// @note', '// a'], '// ') == []
    assert preserved_template_lines(['//a'], '// ') == []


def test_patch_empty_marker_replaces_whole_span() -> None:
    text = 'start\n    // @block S\n    // stale comment\n    old();\n    // @endblock\nend'
    registry = BlockRegistry()
    record = scan_file('a.c', text, registry)
    scan_file('b.c', '// @block_append S\n//   fresh();', registry)

    outcome = patch_file(record, registry)
    assert outcome == Rewritten(
        'a.c',
        'start\n    // @block S\n    fresh();\n    // @endblock\nend',
    )


def test_patch_without_targets_is_unchanged() -> None:
    registry = BlockRegistry()
    record = scan_file('a.c', '// @block_replace X\n//   y', registry)
    assert patch_file(record, registry) == Unchanged('a.c')


def test_patch_identical_content_is_unchanged() -> None:
    text = '// @block_default X\n//   x\nx\n// @endblock\n'
    registry = BlockRegistry()
    record = scan_file('a.c', text, registry)
    assert patch_file(record, registry) == Unchanged('a.c')


def test_patch_keeps_crlf_line_endings() -> None:
    text = '// @block_default X\r\n//   x\r\nold\r\n// @endblock\r\n'
    registry = BlockRegistry()
    record = scan_file('a.c', text, registry)
    outcome = patch_file(record, registry)
    assert outcome == Rewritten('a.c', '// @block_default X\r\n//   x\r\nx\r\n// @endblock\r\n')


def test_patch_keeps_mixed_line_endings() -> None:
    text = 'head\n// @block_default X\n//   x\nold\n// @endblock\r\ntail\n'
    registry = BlockRegistry()
    record = scan_file('a.c', text, registry)
    outcome = patch_file(record, registry)
    assert outcome == Rewritten('a.c', 'head\n// @block_default X\n//   x\nx\n// @endblock\r\ntail\n')


def test_patch_generated_lines_use_directive_line_ending() -> None:
    text = 'head\r\n// @block_default X\n//   x\r\nold\r\n// @endblock\r\n'
    registry = BlockRegistry()
    record = scan_file('a.c', text, registry)
    outcome = patch_file(record, registry)
    assert outcome == Rewritten('a.c', 'head\r\n// @block_default X\n//   x\r\nx\n// @endblock\r\n')


def test_patch_directive_on_last_line() -> None:
    registry = BlockRegistry()
    record = scan_file('a.c', 'head\r\n// @block X', registry)
    scan_file('b.c', '// @block_replace X\n//   new', registry)
    outcome = patch_file(record, registry)
    assert outcome == Rewritten('a.c', 'head\r\n// @block X\r\nnew')


def test_patch_blank_content_lines_have_no_indent() -> None:
    registry = BlockRegistry()
    record = scan_file('a.c', '{\n  // @block B\n  x;\n  // @endblock\n}', registry)
    scan_file('b.c', '// @block_replace B\n//   a;\n//\n//   b;', registry)
    outcome = patch_file(record, registry)
    assert isinstance(outcome, Rewritten)
    assert outcome.text == '{\n  // @block B\n  a;\n\n  b;\n  // @endblock\n}'


def test_patch_unterminated_block_rewrites_to_end_of_file() -> None:
    registry = BlockRegistry()
    record = scan_file('a.c', 'head\n// @block X\nold\ntail', registry)
    scan_file('b.c', '// @block_replace X\n//   new', registry)
    outcome = patch_file(record, registry)
    assert outcome == Rewritten('a.c', 'head\n// @block X\nnew')
