from label_translator.compiler import compile_label, render_label, tokenize
from label_translator.segments import Literal, Placeholder, Template, Text


def test_compile_label_without_delimiter_is_literal():
    compiled = compile_label("Join the iros ^_^")
    assert compiled == Literal("Join the iros ^_^")
    assert compiled.compiled is False


def test_compile_label_splits_text_and_placeholders():
    compiled = compile_label("__myCatName__ is an awesome cat !")
    assert isinstance(compiled, Template)
    assert compiled.compiled is True
    assert compiled.segments == (Placeholder("myCatName"), Text(" is an awesome cat !"))


def test_compile_label_adjacent_and_dotted_placeholders():
    compiled = compile_label("Hi __user.first____user.last__!")
    assert compiled.segments == (
        Text("Hi "),
        Placeholder("user.first"),
        Placeholder("user.last"),
        Text("!"),
    )
    assert compiled.placeholders == ("user.first", "user.last")


def test_compile_label_allows_empty_placeholder_key():
    compiled = compile_label("a____b")
    assert compiled.segments == (Text("a"), Placeholder(""), Text("b"))


def test_compile_label_stray_delimiter_stays_literal():
    assert compile_label("snake__case") == Literal("snake__case")
    assert compile_label("__") == Literal("__")
    assert compile_label("__not closed") == Literal("__not closed")


def test_tokenize_skips_invalid_key_chars():
    segments = list(tokenize("__a-b__ then __ok__"))
    assert segments == [Text("__a-b__ then "), Placeholder("ok")]


def test_template_source_round_trips():
    samples = [
        "__name__ is great",
        "Total: __count__ items in __cart.id__",
        "___x__",
        "a____b",
        "__a____b__c",
        "end with __token__",
    ]
    for raw in samples:
        compiled = compile_label(raw)
        assert isinstance(compiled, Template)
        assert compiled.source() == raw


def test_render_label_uses_bindings_then_keys():
    compiled = compile_label("__name__ is great")
    assert render_label(compiled, {"name": "Tom"}) == "Tom is great"
    assert render_label(compiled, {}) == "name is great"
    assert render_label(compiled) == "name is great"


def test_render_label_stringifies_binding_values():
    compiled = compile_label("__count__ new messages")
    assert render_label(compiled, {"count": 3}) == "3 new messages"


def test_render_literal_ignores_bindings():
    compiled = compile_label("Password")
    assert render_label(compiled, {"Password": "x"}) == "Password"
