"""实例构造与 self 传播

构造分两步：先由类的构造函数建出实例，再把 'set-self!' 沿整条祖先链
传下去，让每个祖先的 self 都指向最外层的实例。这样继承来的方法向 self
发消息时，会找到子类的覆盖版本。
"""

import threading

from msgobj.diagnostics import LOGGER
from msgobj.dispatch import dispatch_table
from msgobj.sender import send, send_to_all


class SelfCell(object):
    """一个实例内部的 self 引用，只能通过 'set-self!' 重新绑定"""

    def __init__(self):
        self._target = None
        self._lock = threading.Lock()

    def get(self):
        return self._target

    def set(self, target):
        with self._lock:
            self._target = target

    def send(self, message, *args):
        """向 self 当前指向的实例发送消息"""
        return send(self._target, message, *args)


def make_instance(cell, type_name, methods, supers=(), final=False):
    """构建一个实例的分发表

    `methods` 是本类定义的消息到操作的映射，优先于 `supers`。
    每个实例都能响应 'set-self!'、'final?' 和 'type'，除非 `methods`
    中给出了自己的版本。返回前把 `cell` 绑定到这个分发表本身。
    """
    supers = list(supers)

    def set_self(outer):
        LOGGER.debug("rebinding self of %s", type_name)
        cell.set(outer)
        send_to_all(supers, 'set-self!', outer)

    table = {
        'set-self!': set_self,
        'final?': lambda: final,
        'type': lambda: type_name,
    }
    table.update(methods)
    dispatch = dispatch_table(table, supers)
    cell.set(dispatch)
    return dispatch


def propagate_self(instance):
    """让 `instance` 及其所有祖先的 self 都指向 `instance`"""
    send(instance, 'set-self!', instance)


def new(constructor, *params):
    """构造实例并完成 self 传播"""
    instance = constructor(*params)
    propagate_self(instance)
    return instance
