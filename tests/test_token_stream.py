import logging

import hypothesis.strategies as st
import pytest
from hypothesis import given

from _parsekit.parser.errors import ParserError, UnexpectedTokenError
from _parsekit.parser.token_stream import TokenStream
from _parsekit.tokenizer.token import Token


def make_tokens(*types):
    return [Token(t * 2, t, 1, 1 + 2 * i) for i, t in enumerate(types)]


@pytest.fixture
def stream():
    return TokenStream(make_tokens("a", "b", "semi", "c"))


def test_looking_at(stream):
    assert stream.looking_at("a")
    assert not stream.looking_at("b")


def test_peek_does_not_consume(stream):
    assert stream.peek().type == "a"
    assert stream.peek().type == "a"
    assert stream.remaining == 4


def test_match(stream):
    assert stream.match("a") == Token("aa", "a", 1, 1)
    assert stream.looking_at("b")
    assert stream.remaining == 3


def test_match_wrong_type(stream):
    stream.next()
    with pytest.raises(UnexpectedTokenError, match="Expected c but found b") as err:
        stream.match("c")
    assert err.value.expected == "c"
    assert err.value.found == "b"
    assert (err.value.line, err.value.character) == (1, 3)
    assert err.value.length == 2
    assert err.value.displayable
    assert stream.looking_at("b")


def test_match_at_end():
    with pytest.raises(UnexpectedTokenError, match="Expected a but found EOF") as err:
        TokenStream([]).match("a")
    assert err.value.found == "EOF"
    assert err.value.token is None
    assert isinstance(err.value, ParserError)


def test_next(stream):
    assert [stream.next().type for _ in range(4)] == ["a", "b", "semi", "c"]
    assert stream.at_end()
    with pytest.raises(ParserError, match="found EOF"):
        stream.next()


@pytest.mark.parametrize("operation", ["peek", "looking_at", "position"])
def test_no_tokens_available(operation):
    stream = TokenStream([])
    args = ["a"] if operation == "looking_at" else []
    with pytest.raises(ParserError, match="No tokens available"):
        getattr(stream, operation)(*args)


def test_at_end():
    assert TokenStream([]).at_end()
    assert not TokenStream(make_tokens("a")).at_end()


def test_expect_end(stream):
    with pytest.raises(UnexpectedTokenError, match="Expected EOF but found a"):
        stream.expect_end()
    stream.resynchronize("c")
    stream.expect_end()


def test_resynchronize(stream):
    stream.resynchronize("semi")
    assert stream.looking_at("c")


def test_resynchronize_consumes_front_token(stream):
    stream.resynchronize("a")
    assert stream.looking_at("b")


def test_resynchronize_without_target(stream):
    stream.resynchronize("missing")
    assert stream.at_end()
    stream.resynchronize("missing")
    assert stream.at_end()


@given(st.lists(st.sampled_from(["a", "b", "semi"]), max_size=10))
def test_resynchronize_stops_after_first_target(types):
    stream = TokenStream(make_tokens(*types))
    stream.resynchronize("semi")
    if "semi" in types:
        assert stream.remaining == len(types) - types.index("semi") - 1
    else:
        assert stream.at_end()


def test_tokens_are_not_modified():
    tokens = make_tokens("a", "b")
    stream = TokenStream(tokens)
    stream.next()
    stream.next()
    assert len(tokens) == 2


def test_position(stream):
    stream.next()
    assert stream.position() == (1, 3)
    assert TokenStream.token_position(Token("x", "x", 4, 2)) == (4, 2)


def test_no_tokens_provided():
    with pytest.raises(ParserError, match="No tokens provided"):
        TokenStream(None)


@pytest.mark.parametrize("tokens", ["abc", 3, iter([])])
def test_non_sequence_tokens(tokens):
    with pytest.raises(ParserError, match="non-sequence"):
        TokenStream(tokens)


def test_invalid_debug():
    with pytest.raises(ValueError):
        TokenStream([], debug="yes")


def test_debug_log(caplog):
    caplog.set_level(logging.DEBUG, logger="_parsekit.parser.token_stream")
    TokenStream(make_tokens("a"), debug=True).match("a")
    assert "matched a" in caplog.text


def test_debug_log_disabled(caplog):
    caplog.set_level(logging.DEBUG, logger="_parsekit.parser.token_stream")
    TokenStream(make_tokens("a")).match("a")
    assert caplog.text == ""
