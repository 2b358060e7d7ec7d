from __future__ import annotations

import pytest

from sigparse.errors import InvalidSignatureError, MalformedDescriptorError
from sigparse.signature.invocation import (
    InvokeCallSite,
    get_num_parameters_for_invocation,
    invoke_output_resolver,
)
from sigparse.signature.parser import SignatureParser
from tests.helpers.fakes import FakeInstruction, ins_invoke


class PoolCallSite:
    """Call site whose descriptor lives in a constant-pool-like table."""

    def __init__(self, index: int) -> None:
        self.index = index

    def get_signature(self, resolver) -> str:
        return resolver(self.index)


def test_count_from_resolved_constant_pool_entry():
    pool = {3: "(ILjava/lang/String;[D)V", 7: "()V"}
    assert get_num_parameters_for_invocation(PoolCallSite(3), pool.__getitem__) == 3
    assert get_num_parameters_for_invocation(PoolCallSite(7), pool.__getitem__) == 0


def test_static_helper_delegates():
    pool = {1: "(JJ)J"}
    assert SignatureParser.get_num_parameters_for_invocation(PoolCallSite(1), pool.get) == 2


def test_invoke_instruction_call_site():
    ins = ins_invoke("invoke-virtual", ["v0", "v1", "v2"], "Lcom/test/Db;", "exec", "(Ljava/lang/String;J)V")
    site = InvokeCallSite(ins)
    assert site.get_signature(invoke_output_resolver) == "(Ljava/lang/String;J)V"
    # the receiver register v0 is not a declared parameter
    assert get_num_parameters_for_invocation(site, invoke_output_resolver) == 2


def test_array_receiver():
    ins = ins_invoke("invoke-virtual", ["v0"], "[Ljava/lang/Object;", "clone", "()Ljava/lang/Object;")
    assert InvokeCallSite(ins).get_signature(invoke_output_resolver) == "()Ljava/lang/Object;"


def test_resolver_rejects_output_without_method_reference():
    with pytest.raises(MalformedDescriptorError):
        invoke_output_resolver("v0, v1")


def test_bad_resolved_string_propagates():
    site = InvokeCallSite(FakeInstruction("invoke-static", "Lcom/A;->m"))
    with pytest.raises(MalformedDescriptorError):
        get_num_parameters_for_invocation(site, invoke_output_resolver)
    with pytest.raises(InvalidSignatureError):
        get_num_parameters_for_invocation(PoolCallSite(0), lambda _: "I)V")
