# tests/core/examples/test_resolver.py
"""
Testes da resolução de placeholders entre documentos.

Os testes asseguram que:
- placeholders são substituídos pelo valor do documento referenciado já resolvido
- a resolução é memoizada e idempotente
- o resultado independe da ordem de resolução dos documentos
- referências não resolvíveis permanecem literais e geram warning
- incompatibilidade de tipo no lookup é fatal
- ciclos (inclusive autorreferência) são tolerados por padrão e fatais via `on_cycle="error"`
- uma falha fatal não deixa documentos presos no estado RESOLVING

Limites explícitos:
    - Não testa escrita de manifests (ver test_store.py)
"""

from pathlib import Path

import pytest

from examplegen.core.examples.document import ResolutionState, ResourceDocument
from examplegen.core.examples.resolver import ReferenceResolver
from examplegen.core.exceptions import ReferenceCycleError, ReferenceLookupError


def _doc(identifier, params):
    return ResourceDocument(
        identifier=identifier,
        output_path=Path(f"/out/{identifier}.yaml"),
        tree={"kind": identifier, "spec": {"forProvider": params}},
    )


def _docs(**params_by_id):
    return {k: _doc(k, v) for k, v in params_by_id.items()}


def _params(doc):
    return doc.tree["spec"]["forProvider"]


def test_simple_reference_is_substituted():
    docs = _docs(A={"f": "${B.x.g}"}, B={"g": "b-001"})
    resolver = ReferenceResolver(docs)
    resolver.resolve_document(docs["A"])
    assert _params(docs["A"]) == {"f": "b-001"}
    assert docs["A"].state is ResolutionState.RESOLVED
    assert docs["B"].state is ResolutionState.RESOLVED


def test_transitive_references_use_resolved_target():
    """
    Verifica que o valor lido de um documento referenciado é o da sua forma resolvida.
    """
    docs = _docs(
        A={"f": "${B.x.g}"},
        B={"g": "${C.x.h}"},
        C={"h": "c-value"},
    )
    ReferenceResolver(docs).resolve_document(docs["A"])
    assert _params(docs["A"])["f"] == "c-value"
    assert _params(docs["B"])["g"] == "c-value"


@pytest.mark.parametrize("order", [("A", "B", "C"), ("C", "B", "A"), ("B", "A", "C")])
def test_result_is_independent_of_resolution_order(order):
    docs = _docs(
        A={"f": "${B.x.g}", "nested": {"deep": "${C.x.h}"}},
        B={"g": "${C.x.h}"},
        C={"h": "c-value"},
    )
    resolver = ReferenceResolver(docs)
    for identifier in order:
        resolver.resolve_document(docs[identifier])
    assert _params(docs["A"]) == {"f": "c-value", "nested": {"deep": "c-value"}}
    assert _params(docs["B"]) == {"g": "c-value"}


def test_resolution_is_idempotent():
    docs = _docs(A={"f": "${B.x.g}"}, B={"g": "b-001"})
    resolver = ReferenceResolver(docs)
    resolver.resolve_document(docs["A"])
    _params(docs["B"])["g"] = "changed"
    resolver.resolve_document(docs["A"])
    assert _params(docs["A"]) == {"f": "b-001"}


def test_lists_only_descend_into_maps():
    docs = _docs(
        A={"items": [{"ref": "${B.x.g}"}, "${B.x.g}"]},
        B={"g": "b-001"},
    )
    ReferenceResolver(docs).resolve_document(docs["A"])
    assert _params(docs["A"])["items"] == [{"ref": "b-001"}, "${B.x.g}"]


def test_nested_field_path_lookup():
    docs = _docs(A={"f": "${B.x.net.ip}"}, B={"net": {"ip": "10.0.0.1"}})
    ReferenceResolver(docs).resolve_document(docs["A"])
    assert _params(docs["A"])["f"] == "10.0.0.1"


def test_unknown_resource_is_kept_literal_with_warning(ctx):
    docs = _docs(A={"f": "${Z.x.g}"})
    ReferenceResolver(docs, ctx=ctx).resolve_document(docs["A"])
    assert _params(docs["A"])["f"] == "${Z.x.g}"
    assert ctx.warnings["A"] == ["unknown resource in reference ${Z.x.g}"]


def test_missing_field_is_kept_literal_with_warning(ctx):
    docs = _docs(A={"f": "${B.x.missing}"}, B={"g": "b"})
    ReferenceResolver(docs, ctx=ctx).resolve_document(docs["A"])
    assert _params(docs["A"])["f"] == "${B.x.missing}"
    assert ctx.warnings["A"] == ["field not found for reference ${B.x.missing}"]


def test_malformed_placeholders_are_inert(ctx):
    docs = _docs(A={"f": "${var.region}", "g": "x-${B.x.g}"}, B={"g": "b"})
    ReferenceResolver(docs, ctx=ctx).resolve_document(docs["A"])
    assert _params(docs["A"]) == {"f": "${var.region}", "g": "x-${B.x.g}"}
    assert ctx.warnings == {}


def test_non_string_target_is_fatal():
    docs = _docs(A={"f": "${B.x.g}"}, B={"g": {"not": "a string"}})
    with pytest.raises(ReferenceLookupError) as excinfo:
        ReferenceResolver(docs).resolve_document(docs["A"])
    assert excinfo.value.details == {
        "resource": "A",
        "referenced_resource": "B",
        "field_path": "spec.forProvider.g",
    }


def test_self_reference_reads_own_partial_tree_by_default(ctx):
    """
    Verifica que, com a política padrão, um documento que referencia a si
    mesmo lê o valor da própria árvore e é escrito normalmente.
    """
    docs = _docs(aws_vpc={"cidr": "10.0.0.0/16", "secondary": "${aws_vpc.other.cidr}"})
    ReferenceResolver(docs, ctx=ctx).resolve_document(docs["aws_vpc"])
    assert _params(docs["aws_vpc"]) == {"cidr": "10.0.0.0/16", "secondary": "10.0.0.0/16"}
    assert docs["aws_vpc"].resolved
    assert ctx.warnings["aws_vpc"] == ["reference cycle tolerated: aws_vpc -> aws_vpc"]


def test_indirect_cycle_is_tolerated_by_default():
    docs = _docs(A={"f": "${B.x.g}", "own": "a"}, B={"g": "${A.x.own}"})
    ReferenceResolver(docs).resolve_document(docs["A"])
    assert _params(docs["A"])["f"] == "a"


def test_cycle_raises_when_policy_is_error():
    docs = _docs(A={"f": "${B.x.g}"}, B={"g": "${A.x.f}"})
    with pytest.raises(ReferenceCycleError) as excinfo:
        ReferenceResolver(docs, on_cycle="error").resolve_document(docs["A"])
    assert excinfo.value.details["chain"] == ["A", "B", "A"]
    assert excinfo.value.details["resource"] == "B"


def test_self_reference_raises_when_policy_is_error():
    docs = _docs(A={"f": "v", "g": "${A.x.f}"})
    with pytest.raises(ReferenceCycleError) as excinfo:
        ReferenceResolver(docs, on_cycle="error").resolve_document(docs["A"])
    assert excinfo.value.details["chain"] == ["A", "A"]


def test_failed_resolution_resets_documents_on_the_chain():
    """
    Verifica que uma falha fatal devolve ao estado UNRESOLVED os documentos
    que estavam em resolução, e que uma nova tentativa funciona.
    """
    docs = _docs(A={"f": "${B.x.g}"}, B={"g": {"not": "str"}})
    with pytest.raises(ReferenceLookupError):
        ReferenceResolver(docs).resolve_document(docs["A"])
    assert docs["A"].state is ResolutionState.UNRESOLVED

    docs["B"] = _doc("B", {"g": "fixed"})
    ReferenceResolver(docs).resolve_document(docs["A"])
    assert _params(docs["A"]) == {"f": "fixed"}


def test_failed_cycle_resets_every_document_on_the_chain():
    docs = _docs(A={"f": "${B.x.g}"}, B={"g": "${A.x.f}"})
    with pytest.raises(ReferenceCycleError):
        ReferenceResolver(docs, on_cycle="error").resolve_document(docs["A"])
    assert docs["A"].state is ResolutionState.UNRESOLVED
    assert docs["B"].state is ResolutionState.UNRESOLVED


def test_cycle_tolerated_reads_partially_resolved_document(ctx):
    """
    Verifica que, com `on_cycle="tolerate"`, o lookup no documento em
    resolução usa o valor corrente (ainda literal) e registra warning.
    """
    docs = _docs(A={"f": "${B.x.g}", "own": "a-001"}, B={"g": "${A.x.own}"})
    ReferenceResolver(docs, on_cycle="tolerate", ctx=ctx).resolve_document(docs["A"])
    assert _params(docs["B"])["g"] == "a-001"
    assert _params(docs["A"])["f"] == "a-001"
    assert ctx.warnings["B"] == ["reference cycle tolerated: A -> B -> A"]
    assert docs["A"].resolved and docs["B"].resolved


def test_invalid_cycle_policy_is_rejected():
    with pytest.raises(ValueError):
        ReferenceResolver({}, on_cycle="ignore")


def test_resolved_event_is_logged(ctx):
    docs = _docs(A={"f": "plain"})
    ReferenceResolver(docs, ctx=ctx).resolve_document(docs["A"])
    assert any(e["resource"] == "A" and e["message"] == "document resolved" for e in ctx.events)
