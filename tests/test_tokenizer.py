from __future__ import annotations

import pytest

from sigparse.errors import MalformedDescriptorError
from sigparse.signature.tokenizer import ParameterSignatureIterator


def test_tokens_in_order():
    it = ParameterSignatureIterator("(ILjava/lang/String;[D)V")
    assert list(it) == ["I", "Ljava/lang/String;", "[D"]


def test_empty_parameter_list():
    it = ParameterSignatureIterator("()V")
    assert not it.has_next()
    assert list(it) == []


def test_nested_arrays_are_one_token():
    it = ParameterSignatureIterator("([[I[[[Ljava/lang/Object;J)V")
    assert list(it) == ["[[I", "[[[Ljava/lang/Object;", "J"]


def test_every_primitive_code():
    assert list(ParameterSignatureIterator("(BCDFIJSZ)V")) == list("BCDFIJSZ")


def test_reference_stops_at_first_semicolon():
    it = ParameterSignatureIterator("(La/B;Lc/D;)V")
    assert next(it) == "La/B;"
    assert next(it) == "Lc/D;"
    with pytest.raises(StopIteration):
        next(it)


def test_traversal_is_forward_only():
    it = ParameterSignatureIterator("(IJ)V")
    assert next(it) == "I"
    assert list(it) == ["J"]
    assert list(it) == []


def test_unterminated_reference_is_malformed():
    it = ParameterSignatureIterator("(Ljava/lang/Object")
    assert it.has_next()
    with pytest.raises(MalformedDescriptorError):
        next(it)


def test_void_parameter_is_malformed():
    with pytest.raises(MalformedDescriptorError):
        list(ParameterSignatureIterator("(IV)V"))


def test_unknown_code_is_malformed():
    with pytest.raises(MalformedDescriptorError):
        list(ParameterSignatureIterator("(Q)V"))


def test_dangling_array_prefix_is_malformed():
    with pytest.raises(MalformedDescriptorError):
        list(ParameterSignatureIterator("(I[)V"))
    with pytest.raises(MalformedDescriptorError):
        list(ParameterSignatureIterator("(["))


def test_missing_close_paren_surfaces_at_has_next():
    it = ParameterSignatureIterator("(I")
    assert next(it) == "I"
    with pytest.raises(MalformedDescriptorError):
        it.has_next()


def test_errors_are_lazy():
    it = ParameterSignatureIterator("(IQ)V")
    assert next(it) == "I"
    with pytest.raises(MalformedDescriptorError):
        next(it)
