'''
测试工具类，为所有测试类的父类，存放一些测试公共方法
'''

from contextlib import contextmanager
import logging
import unittest

from msgobj import send
from msgobj.diagnostics import LOGGER_NAME


class Messages(logging.Handler):
    '''收集日志记录的 handler'''

    def __init__(self):
        logging.Handler.__init__(self, logging.DEBUG)
        self.records = []

    def emit(self, record):
        self.records.append(record)

    def __contains__(self, item):
        return any(item in record.getMessage() for record in self.records)

    def __repr__(self):
        return repr([record.getMessage() for record in self.records])

    def kinds(self):
        '''按顺序返回所有诊断记录的错误类型'''
        return [record.kind for record in self.records if hasattr(record, 'kind')]


@contextmanager
def capture_logging():
    '''捕获 msgobj 日志，用法见 test_sender'''
    logger = logging.getLogger(LOGGER_NAME)
    level = logger.level
    logger.setLevel(logging.DEBUG)
    handler = Messages()
    logger.addHandler(handler)
    try:
        yield handler
    finally:
        logger.removeHandler(handler)
        logger.setLevel(level)


class ObjectTestCase(unittest.TestCase):

    def assertResponds(self, receiver, message, expected, *args):
        '''断言发送消息得到 `expected`，且没有诊断信息'''
        with capture_logging() as messages:
            result = send(receiver, message, *args)
        self.assertEqual(result, expected)
        self.assertEqual(messages.kinds(), [])

    def assertFails(self, kind, receiver, message, *args):
        '''断言发送失败，返回 None 并报告 `kind`'''
        with capture_logging() as messages:
            result = send(receiver, message, *args)
        self.assertIsNone(result)
        self.assertEqual(messages.kinds(), [kind])
        return messages
