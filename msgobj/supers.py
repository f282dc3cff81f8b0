"""父实例列表与 final 类检查"""

from msgobj.diagnostics import FINAL_CLASS_TEXT, FINAL_CLASS_VIOLATION, report
from msgobj.dispatch import understands
from msgobj.sender import send


def describe(instance):
    """实例的描述，用于诊断信息

    优先使用 'info'，不认识 'info' 的实例退回到 'type'。
    """
    if understands(instance, 'info'):
        return send(instance, 'info')
    return send(instance, 'type')


def make_supers(parents):
    """由已经构造好的父实例构建 supers 列表

    类为 final 的父实例会被剔除并记录警告，剩下的保持原有顺序。
    """
    supers = []
    for parent in parents:
        # 只有明确返回 True 才算 final
        if send(parent, 'final?') is True:
            report(FINAL_CLASS_VIOLATION, FINAL_CLASS_TEXT + ': %r',
                   describe(parent))
            continue
        supers.append(parent)
    return supers
