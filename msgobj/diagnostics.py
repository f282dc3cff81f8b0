"""诊断通道

内核从不抛出异常，所有错误都作为诊断信息记录到 ``msgobj`` 日志中，
调用方可以通过日志记录的 ``kind`` 属性区分错误原因。
"""

import logging

LOGGER_NAME = 'msgobj'
LOGGER = logging.getLogger(LOGGER_NAME)

# 错误类型
INVALID_RECEIVER = 'InvalidReceiver'
MESSAGE_NOT_UNDERSTOOD = 'MessageNotUnderstood'
FINAL_CLASS_VIOLATION = 'FinalClassViolation'

# 诊断文本
INVALID_RECEIVER_TEXT = '[error] Inappropriate receiver object'
NOT_UNDERSTOOD_TEXT = '[error] Message not understood'
FINAL_CLASS_TEXT = '[warning] Final class cannot be used as a parent'

# 每种错误对应的日志级别
LEVELS = {
    INVALID_RECEIVER: logging.ERROR,
    MESSAGE_NOT_UNDERSTOOD: logging.ERROR,
    FINAL_CLASS_VIOLATION: logging.WARNING,
}

LOG_FORMAT = '%(asctime)s - %(filename)s[line:%(lineno)d] - %(levelname)s: %(message)s'


def report(kind, text, *args):
    """记录一条 `kind` 类型的诊断信息，不抛出异常"""
    LOGGER.log(LEVELS[kind], text, *args, extra={'kind': kind})


def setup_logging(verbosity=2, filename=None):
    """配置诊断日志

    `verbosity` 从 0 到 3 分别对应 ERROR、WARN、INFO、DEBUG。
    给出 `filename` 时写入文件，否则输出到控制台。
    返回新添加的 handler，方便调用方之后移除。每次调用都会再添加一个
    handler。配置之后 msgobj 日志不再向上传给根日志，避免根日志也配置了
    handler 时每条诊断输出两次。
    """
    levels = (logging.ERROR, logging.WARN, logging.INFO, logging.DEBUG)
    LOGGER.setLevel(levels[max(0, min(verbosity, len(levels) - 1))])
    if filename:
        handler = logging.FileHandler(filename, 'w', 'utf-8')
    else:
        handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    LOGGER.addHandler(handler)
    LOGGER.propagate = False
    return handler
