"""Tests for TransitionOptions."""

import dataclasses

import pytest

from stepmachine.model.transition import TransitionOptions


class TestTransitionOptions:
    def test_defaults(self):
        options = TransitionOptions()

        assert options.skip_leave_current is False
        assert options.skip_enter_next is False
        assert options.fallback_to_incomplete_dependency is True

    def test_options_are_immutable(self):
        options = TransitionOptions()

        with pytest.raises(dataclasses.FrozenInstanceError):
            options.skip_enter_next = True  # type: ignore[misc]

    def test_from_kwargs(self):
        options = TransitionOptions.from_kwargs(
            skip_enter_next=True, fallback_to_incomplete_dependency=False
        )

        assert options == TransitionOptions(
            skip_enter_next=True, fallback_to_incomplete_dependency=False
        )

    def test_from_kwargs_rejects_unknown_options(self):
        with pytest.raises(TypeError, match="immediate"):
            TransitionOptions.from_kwargs(immediate=True)

    def test_merged_overrides_only_given_fields(self):
        options = TransitionOptions(skip_leave_current=True)

        merged = options.merged(skip_enter_next=True)

        assert merged == TransitionOptions(skip_leave_current=True, skip_enter_next=True)
        assert options.skip_enter_next is False

    def test_merged_without_overrides_returns_same_instance(self):
        options = TransitionOptions()

        assert options.merged() is options
