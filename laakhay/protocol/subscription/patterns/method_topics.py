"""Flat topics array: ``{"method": ..., "topics": [...]}`` (Exmo)."""

from __future__ import annotations

from ...core.enums import SubscriptionPattern
from ..base import VerbStrategy


class MethodTopics(VerbStrategy):
    pattern = SubscriptionPattern.METHOD_TOPICS
    default_op_field = "method"
    default_args_field = "topics"
    default_separator = ":"
