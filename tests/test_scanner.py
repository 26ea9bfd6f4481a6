import pytest


def types(tokens):
    return [token.type for token in tokens]


def test_punctuation(scan):
    tokens, err = scan("(){},.-+;*")
    assert err == ""
    assert types(tokens) == [
        "LEFT_PAREN", "RIGHT_PAREN", "LEFT_BRACE", "RIGHT_BRACE", "COMMA",
        "DOT", "MINUS", "PLUS", "SEMICOLON", "STAR", "EOF"]


@pytest.mark.parametrize("source, expected", [
    ("!", ["BANG"]),
    ("!=", ["BANG_EQUAL"]),
    ("=", ["EQUAL"]),
    ("==", ["EQUAL_EQUAL"]),
    ("<", ["LESS"]),
    ("<=", ["LESS_EQUAL"]),
    (">", ["GREATER"]),
    (">=", ["GREATER_EQUAL"]),
    ("/", ["SLASH"]),
    ("= =", ["EQUAL", "EQUAL"]),
    ("!==", ["BANG_EQUAL", "EQUAL"]),
])
def test_operators(scan, source, expected):
    tokens, _ = scan(source)
    assert types(tokens) == expected + ["EOF"]


def test_comment_runs_to_end_of_line(scan):
    tokens, _ = scan("1 // ignored ( ) \"\n2")
    assert types(tokens) == ["NUMBER", "NUMBER", "EOF"]
    assert tokens[1].line == 2


def test_comment_at_end_of_input(scan):
    tokens, err = scan("// nothing here")
    assert err == ""
    assert types(tokens) == ["EOF"]


def test_string_literal(scan):
    tokens, _ = scan('"hello world"')
    assert tokens[0].type == "STRING"
    assert tokens[0].lexeme == '"hello world"'
    assert tokens[0].literal == "hello world"


def test_multiline_string_keeps_start_line(scan):
    tokens, _ = scan('"a\nb" x')
    assert tokens[0].literal == "a\nb"
    assert tokens[0].line == 1
    assert tokens[1].line == 2


def test_unterminated_string(scan):
    tokens, err = scan('"never closed')
    assert err == "[line 1] Error: Unterminated string.\n"
    assert types(tokens) == ["EOF"]


def test_numbers(scan):
    tokens, _ = scan("123 4.5 6.")
    assert [token.literal for token in tokens[:3]] == [123.0, 4.5, 6.0]
    assert types(tokens) == ["NUMBER", "NUMBER", "NUMBER", "DOT", "EOF"]


def test_number_has_no_sign(scan):
    tokens, _ = scan("-1")
    assert types(tokens) == ["MINUS", "NUMBER", "EOF"]


def test_keywords_and_identifiers(scan):
    source = "and class else false fun for if nil or print return super this true var while"
    tokens, _ = scan(source)
    assert types(tokens)[:-1] == [word.upper() for word in source.split()]

    tokens, _ = scan("_foo bar9 classy")
    assert types(tokens) == ["IDENTIFIER"] * 3 + ["EOF"]
    assert [token.lexeme for token in tokens[:3]] == ["_foo", "bar9", "classy"]


def test_unexpected_character_continues(scan):
    tokens, err = scan("1 @ 2\n#")
    assert err == ("[line 1] Error: Unexpected character.\n"
                   "[line 2] Error: Unexpected character.\n")
    assert types(tokens) == ["NUMBER", "NUMBER", "EOF"]


def test_non_ascii_letters_are_not_identifiers(scan):
    _, err = scan("é")
    assert "Unexpected character." in err


def test_lines_and_eof(scan):
    tokens, _ = scan("a\nb\r\n\tc\n")
    assert [token.line for token in tokens] == [1, 2, 3, 4]
    assert tokens[-1].type == "EOF"
    assert tokens[-1].lexeme == ""


def test_lexemes_cover_source_apart_from_whitespace(scan):
    source = 'class A < B { init(x) { this.x = x >= 1.5 and "s"; } }\nprint A(2) != nil;'
    tokens, _ = scan(source)
    assert "".join(token.lexeme for token in tokens) == "".join(source.split())
