"""分发表与方法解析

每个实例都是一个分发表：一个接收消息键、返回绑定操作的函数。
本地定义的消息优先，找不到时再按顺序询问父实例。
"""

import weakref

# 分发表遇到不认识的消息时返回这个哨兵，它不可调用
NOT_UNDERSTOOD = object()

# 由 dispatch_table 构建的所有分发函数
_TABLES = weakref.WeakSet()


def is_dispatch_table(obj):
    """`obj` 是否是 dispatch_table 构建的分发函数

    其它可调用对象（内置类型、普通函数、绑定方法）都不是合法的接收者。
    """
    try:
        return obj in _TABLES
    except TypeError:
        # 不可哈希的对象
        return False


def resolve(candidates, message):
    """在 `candidates` 中按顺序查找 `message`

    返回第一个找到的操作。每个候选者自己的分发表会在本地找不到时
    继续询问它的父实例，所以这里不需要关心继承深度。
    同一个祖先经由不同路径出现时不做去重。
    """
    for candidate in candidates:
        if not is_dispatch_table(candidate):
            continue
        op = candidate(message)
        if callable(op):
            return op
    return NOT_UNDERSTOOD


def dispatch_table(methods, supers=()):
    """构建分发函数：先查 `methods`，再按顺序查 `supers`"""
    methods = dict(methods)

    def dispatch(message):
        try:
            op = methods.get(message, NOT_UNDERSTOOD)
        except TypeError:
            # 不可哈希的消息键
            return NOT_UNDERSTOOD
        if op is not NOT_UNDERSTOOD:
            return op
        return resolve(supers, message)

    _TABLES.add(dispatch)
    return dispatch


def understands(receiver, message):
    """`receiver` 能否响应 `message`

    只查找，不调用，也不记录诊断信息。
    """
    if not is_dispatch_table(receiver):
        return False
    return resolve([receiver], message) is not NOT_UNDERSTOOD
