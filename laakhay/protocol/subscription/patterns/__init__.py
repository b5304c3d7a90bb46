"""Subscription strategy implementations, one module per wire shape."""

from .action_subscribe import ActionSubscribe
from .custom import Custom
from .event_subscribe import EventSubscribe
from .jsonrpc import JsonRpc
from .method_as_topic import MethodAsTopic
from .method_params import MethodParams
from .method_subscribe import MethodSubscribe
from .method_subscription import MethodSubscription
from .method_topics import MethodTopics
from .op_subscribe import OpSubscribe
from .op_subscribe_objects import OpSubscribeObjects
from .reqtype_sub import ReqtypeSub
from .sub_based import SubBased
from .type_subscribe import TypeSubscribe

__all__ = [
    "ActionSubscribe",
    "Custom",
    "EventSubscribe",
    "JsonRpc",
    "MethodAsTopic",
    "MethodParams",
    "MethodSubscribe",
    "MethodSubscription",
    "MethodTopics",
    "OpSubscribe",
    "OpSubscribeObjects",
    "ReqtypeSub",
    "SubBased",
    "TypeSubscribe",
]
