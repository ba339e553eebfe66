import pytest

import json_decoder as jd


def render(value):
    """Minimal re-serializer used only to check round-trip stability."""
    if isinstance(value, jd.String):
        out = []
        for ch in value.text:
            if ch in '"\\':
                out.append("\\" + ch)
            elif ord(ch) < 0x20:
                out.append(f"\\u{ord(ch):04x}")
            else:
                out.append(ch)
        return '"' + "".join(out) + '"'
    if isinstance(value, jd.Number):
        return repr(value.value)
    if isinstance(value, jd.Object):
        return "{" + ",".join(f"{render(jd.String(k))}:{render(v)}"
                              for k, v in value.members.items()) + "}"
    if isinstance(value, jd.Array):
        return "[" + ",".join(render(v) for v in value.items) + "]"
    if isinstance(value, jd.Bool):
        return "true" if value.value else "false"
    if isinstance(value, jd.Null):
        return "null"
    raise TypeError(value)

DOCS = [
    'null',
    '"tab\\tquote\\"slash\\/\\u00e9\\b"',
    '[1, -2.5, 3e10, 0.001, []]',
    '{"a": {"b": [true, false, null, "x"]}, "a2": -0}',
    '{"k": 1, "k": 2, "nested": [[[{"deep": "\\u4e2d"}]]]}',
]

@pytest.mark.parametrize("doc", DOCS)
def test_render_then_parse_is_stable(doc):
    first = jd.parse_document(doc)
    assert jd.parse_document(render(first)) == first
