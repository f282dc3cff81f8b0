from msgobj.diagnostics import (
    FINAL_CLASS_VIOLATION, INVALID_RECEIVER, MESSAGE_NOT_UNDERSTOOD,
    setup_logging,
)
from msgobj.dispatch import NOT_UNDERSTOOD, is_dispatch_table, resolve, understands
from msgobj.factory import SelfCell, make_instance, new, propagate_self
from msgobj.sender import Reply, deliver, send, send_to_all
from msgobj.supers import make_supers

# 指定能被其它模块引用的函数、类等
__all__ = [
    'FINAL_CLASS_VIOLATION', 'INVALID_RECEIVER', 'MESSAGE_NOT_UNDERSTOOD',
    'NOT_UNDERSTOOD', 'Reply', 'SelfCell',
    'deliver', 'is_dispatch_table', 'make_instance', 'make_supers', 'new',
    'propagate_self', 'resolve', 'send', 'send_to_all', 'setup_logging',
    'understands',
]
