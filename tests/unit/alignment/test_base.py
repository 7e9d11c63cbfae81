"""
Tests for alignment data structures and configuration.

Tests cover:
- ComparisonOptions defaults, mapping construction and coercion
- AlignmentCosts defaults and validation
- AlignmentOp constructors and serialization
- Alignment container helpers
"""

import dataclasses

import pytest

from dictation_checker.alignment.base import (
    DEFAULT_COSTS,
    DELETE,
    INSERT,
    MATCH,
    OP_TYPES,
    SUBSTITUTE,
    Alignment,
    AlignmentCosts,
    AlignmentOp,
    ComparisonOptions,
)


class TestComparisonOptions:
    """Tests for ComparisonOptions."""

    def test_defaults(self):
        options = ComparisonOptions()
        assert options.ignore_case is True
        assert options.ignore_punctuation is True

    def test_frozen(self):
        options = ComparisonOptions()
        with pytest.raises(dataclasses.FrozenInstanceError):
            options.ignore_case = False

    def test_from_mapping_snake_case(self):
        options = ComparisonOptions.from_mapping({"ignore_case": False})
        assert options == ComparisonOptions(ignore_case=False, ignore_punctuation=True)

    def test_from_mapping_camel_case(self):
        options = ComparisonOptions.from_mapping({"ignoreCase": False, "ignorePunctuation": False})
        assert options == ComparisonOptions(ignore_case=False, ignore_punctuation=False)

    def test_from_mapping_ignores_unknown_and_none(self):
        options = ComparisonOptions.from_mapping({"strict": True, "ignoreCase": None})
        assert options == ComparisonOptions()

    def test_from_mapping_empty(self):
        assert ComparisonOptions.from_mapping({}) == ComparisonOptions()
        assert ComparisonOptions.from_mapping(None) == ComparisonOptions()

    def test_from_mapping_truthy_values(self):
        options = ComparisonOptions.from_mapping({"ignore_case": 0, "ignore_punctuation": "yes"})
        assert options.ignore_case is False
        assert options.ignore_punctuation is True

    def test_coerce(self):
        options = ComparisonOptions(ignore_case=False)
        assert ComparisonOptions.coerce(options) is options
        assert ComparisonOptions.coerce(None) == ComparisonOptions()
        assert ComparisonOptions.coerce({"ignoreCase": False}) == options

    @pytest.mark.parametrize("bad", ["ignore_case", 1, ["ignore_case"], True])
    def test_coerce_rejects_other_types(self, bad):
        with pytest.raises(TypeError):
            ComparisonOptions.coerce(bad)

    def test_to_dict(self):
        assert ComparisonOptions().to_dict() == {
            "ignore_case": True,
            "ignore_punctuation": True,
        }


class TestAlignmentCosts:
    """Tests for AlignmentCosts."""

    def test_defaults(self):
        costs = AlignmentCosts()
        assert (costs.match, costs.substitution, costs.insertion, costs.deletion) == (0, 3, 2, 2)
        assert DEFAULT_COSTS == costs

    def test_negative_cost_rejected(self):
        with pytest.raises(ValueError, match="substitution"):
            AlignmentCosts(substitution=-1)

    def test_zero_costs_allowed(self):
        costs = AlignmentCosts(substitution=0, insertion=0, deletion=0)
        assert costs.substitution == 0


class TestAlignmentOp:
    """Tests for AlignmentOp."""

    def test_constructors(self):
        assert AlignmentOp.match("tag", "tag").op == MATCH
        assert AlignmentOp.substitute("führen", "führ").op == SUBSTITUTE

        deletion = AlignmentOp.delete("nach", 2)
        assert deletion.op == DELETE
        assert deletion.user_word is None
        assert deletion.ref_index == 2

        insertion = AlignmentOp.insert("schönen", 1)
        assert insertion.op == INSERT
        assert insertion.ref_word is None
        assert insertion.user_index == 1

    def test_is_match(self):
        assert AlignmentOp.match("a", "a").is_match
        assert not AlignmentOp.substitute("a", "b").is_match

    def test_to_dict(self):
        op = AlignmentOp.substitute("führen", "führ", 0, 0)
        assert op.to_dict() == {"op": "sub", "ref_word": "führen", "user_word": "führ"}


class TestAlignment:
    """Tests for the Alignment container."""

    @pytest.fixture
    def alignment(self):
        return Alignment(
            ops=[
                AlignmentOp.match("ich", "ich", 0, 0),
                AlignmentOp.insert("doch", 1),
                AlignmentOp.substitute("gehe", "geh", 1, 2),
                AlignmentOp.delete("heim", 2),
            ],
            distance=7,
        )

    def test_sequence_protocol(self, alignment):
        assert len(alignment) == 4
        assert alignment[0].op == MATCH
        assert [op.op for op in alignment] == [MATCH, INSERT, SUBSTITUTE, DELETE]

    def test_word_lists(self, alignment):
        assert alignment.ref_words == ["ich", "gehe", "heim"]
        assert alignment.user_words == ["ich", "doch", "geh"]

    def test_counts(self, alignment):
        counts = alignment.counts()
        assert set(counts) == set(OP_TYPES)
        assert counts == {MATCH: 1, SUBSTITUTE: 1, DELETE: 1, INSERT: 1}

    def test_to_dict(self, alignment):
        data = alignment.to_dict()
        assert data["distance"] == 7
        assert len(data["ops"]) == 4
        assert data["ops"][1] == {"op": "ins", "ref_word": None, "user_word": "doch"}

    def test_repr(self, alignment):
        assert repr(alignment) == "Alignment(4 ops, distance=7)"
