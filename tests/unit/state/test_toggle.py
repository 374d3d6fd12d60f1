from __future__ import annotations

import pytest

from assetctl.core.catalog import AssetKind
from assetctl.core.enablement import EnablementStore
from assetctl.core.exceptions import AssetNotFoundError
from assetctl.core.state import DomainState, toggle_asset

from helpers.catalog import collection, instruction, item, make_catalog, prompt

I1 = "instructions/i1.instructions.md"
C1 = "collections/c1.collection.yml"


def _scenario_state(store: EnablementStore) -> DomainState:
    catalog = make_catalog(
        instruction(I1),
        collection(C1, "c1", [item(I1, AssetKind.INSTRUCTION)]),
    )
    return DomainState(catalog, store)


def test_disabled_collection_cascades_then_toggle_enables_member() -> None:
    state = _scenario_state(EnablementStore(collections={C1: False}))

    before = state.find(AssetKind.INSTRUCTION, I1)
    assert before is not None
    assert before.effective is False
    assert before.inherited is not None
    assert before.inherited.collection.id == "c1"
    assert before.inherited.value is False

    result = toggle_asset(state, AssetKind.COLLECTION, C1, unresolved_baseline=False)

    assert state.store.collections == {C1: True}
    assert result.asset.effective is True
    after = state.find(AssetKind.INSTRUCTION, I1)
    assert after is not None and after.effective is True


def test_default_baseline_clears_collection_override_instead_of_enabling() -> None:
    # With the historical baseline of true, toggling c1 from false computes
    # desired == baseline and drops the override rather than setting true.
    state = _scenario_state(EnablementStore(collections={C1: False}))

    result = toggle_asset(state, AssetKind.COLLECTION, C1)

    assert state.store.collections == {}
    assert result.asset.effective is False
    assert result.explicit_before is False
    assert result.explicit_after is None
    member = state.find(AssetKind.INSTRUCTION, I1)
    assert member is not None
    assert member.inherited is None
    assert member.effective is False


def test_default_baseline_leaves_unresolved_disabled_asset_disabled() -> None:
    state = DomainState(make_catalog(prompt("prompts/p.prompt.md")))

    result = toggle_asset(state, AssetKind.PROMPT, "prompts/p.prompt.md")

    assert result.asset.effective is False
    assert result.changed is False
    assert state.store.prompts == {}


def test_false_baseline_writes_explicit_override_for_unresolved_asset() -> None:
    state = DomainState(make_catalog(prompt("prompts/p.prompt.md")))

    result = toggle_asset(state, AssetKind.PROMPT, "prompts/p.prompt.md", unresolved_baseline=False)

    assert result.asset.effective is True
    assert result.asset.explicit is True
    assert state.store.prompts == {"prompts/p.prompt.md": True}


def test_toggle_removes_override_when_desired_matches_inherited_value() -> None:
    state = _scenario_state(EnablementStore(instructions={I1: False}, collections={C1: True}))

    result = toggle_asset(state, AssetKind.INSTRUCTION, I1)

    assert I1 not in state.store.instructions
    assert result.asset.explicit is None
    assert result.asset.effective is True
    assert result.asset.source == "inherited"


def test_toggle_writes_override_against_inherited_value() -> None:
    state = _scenario_state(EnablementStore(collections={C1: True}))

    result = toggle_asset(state, AssetKind.INSTRUCTION, I1)

    assert state.store.instructions == {I1: False}
    assert result.asset.effective is False


@pytest.mark.parametrize("collection_value", [True, False])
def test_toggling_inheriting_member_twice_restores_effective_state(collection_value: bool) -> None:
    state = _scenario_state(EnablementStore(collections={C1: collection_value}))
    original = state.find(AssetKind.INSTRUCTION, I1)
    assert original is not None

    toggle_asset(state, AssetKind.INSTRUCTION, I1)
    second = toggle_asset(state, AssetKind.INSTRUCTION, I1)

    assert second.asset.effective == original.effective
    assert I1 not in state.store.instructions


@pytest.mark.parametrize("initial", [None, True, False])
def test_toggling_twice_with_false_baseline_restores_effective_state(initial) -> None:
    store = EnablementStore()
    if initial is not None:
        store.prompts["prompts/p.prompt.md"] = initial
    state = DomainState(make_catalog(prompt("prompts/p.prompt.md")), store)
    original = state.find(AssetKind.PROMPT, "prompts/p.prompt.md")
    assert original is not None

    first = toggle_asset(state, AssetKind.PROMPT, "prompts/p.prompt.md", unresolved_baseline=False)
    second = toggle_asset(state, AssetKind.PROMPT, "prompts/p.prompt.md", unresolved_baseline=False)

    assert first.asset.effective is not original.effective
    assert second.asset.effective == original.effective


def test_toggle_unknown_path_raises_asset_not_found() -> None:
    state = DomainState(make_catalog(prompt("prompts/p.prompt.md")))

    with pytest.raises(AssetNotFoundError) as excinfo:
        toggle_asset(state, AssetKind.PROMPT, "prompts/missing.prompt.md")

    assert excinfo.value.path == "prompts/missing.prompt.md"
    assert state.store.count() == 0


def test_toggle_looks_up_path_within_requested_kind_only() -> None:
    state = DomainState(make_catalog(prompt("prompts/p.prompt.md")))

    with pytest.raises(AssetNotFoundError):
        toggle_asset(state, AssetKind.INSTRUCTION, "prompts/p.prompt.md")
