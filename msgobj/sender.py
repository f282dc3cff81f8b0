"""消息发送

``send`` 是与实例交互的唯一入口。发送失败时只记录诊断信息并返回
None，不会中断调用方。
"""

from collections import namedtuple

from msgobj.diagnostics import (
    INVALID_RECEIVER, INVALID_RECEIVER_TEXT, LOGGER,
    MESSAGE_NOT_UNDERSTOOD, NOT_UNDERSTOOD_TEXT, report,
)
from msgobj.dispatch import NOT_UNDERSTOOD, is_dispatch_table, resolve

# 发送结果，error 为 None 表示成功，否则为错误类型
Reply = namedtuple('Reply', ['value', 'error'])


def deliver(receiver, message, *args):
    """向 `receiver` 发送 `message`，返回 Reply"""
    if not is_dispatch_table(receiver):
        report(INVALID_RECEIVER, INVALID_RECEIVER_TEXT + ': %r', receiver)
        return Reply(None, INVALID_RECEIVER)

    op = resolve([receiver], message)
    if op is NOT_UNDERSTOOD:
        report(MESSAGE_NOT_UNDERSTOOD, NOT_UNDERSTOOD_TEXT + ': %s', message)
        return Reply(None, MESSAGE_NOT_UNDERSTOOD)

    LOGGER.debug("sending %s with %d args", message, len(args))
    return Reply(op(*args), None)


def send(receiver, message, *args):
    """向 `receiver` 发送 `message` 并返回结果，失败时返回 None"""
    return deliver(receiver, message, *args).value


def send_to_all(receivers, message, *args):
    """按顺序向每个接收者发送同一条消息，忽略返回值

    某个接收者失败不影响其余接收者。
    """
    for receiver in receivers:
        send(receiver, message, *args)
