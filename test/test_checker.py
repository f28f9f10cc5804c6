#!/usr/bin/env python

import contextlib
import io
import logging
import os
import unittest
from unittest import mock

from test_base_pipeline import BasePipelineTest

from topljavac.checker import Checker, extractLine
from topljavac.config import ToolConfig, getToolConfig
from topljavac.errors import ConfigurationError
from topljavac.logconfig import logConfig, loggingConfiguration, requestedLevel


class CheckerTest(BasePipelineTest):
    """
    topljavac-sanity-checker against the fake tools
    """
    def check(self, **env):
        out = io.StringIO()
        with mock.patch.dict(os.environ, env), contextlib.redirect_stdout(out):
            rc = Checker().check()
        return rc, out.getvalue()

    def test_tools_found(self):
        rc, out = self.check(TOPLJAVAC_TOOL_PATH=self.tool_directory)
        self.assertEqual(rc, 0)
        self.assertIn('topljavac version:', out)
        self.assertIn('was found', out)

    def test_tool_missing(self):
        rc, out = self.check(TOPLJAVAC_TOOL_PATH=self.tool_directory, TOPLJAVAC_TOPLC_NAME='toplc-nope')
        self.assertEqual(rc, 1)
        self.assertIn('toplc-nope was not found or not executable', out)

    def test_bad_tool_path(self):
        rc, out = self.check(TOPLJAVAC_TOOL_PATH=os.path.join(self.work_directory, 'nope'))
        self.assertEqual(rc, 1)
        self.assertIn('does not exist or is not a directory', out)

    def test_extract_line(self):
        self.assertEqual(extractLine('javac 1.8.0\n', 0), 'javac 1.8.0')
        self.assertEqual(extractLine('one\ntwo', 5), 'two')
        self.assertEqual(extractLine('', 0), '')


class ConfigTest(unittest.TestCase):

    def test_defaults(self):
        with mock.patch.dict(os.environ, {}, clear=True):
            tools = getToolConfig()
        self.assertEqual(tools.getCompiler(), ['javac'])
        self.assertEqual(tools.getInstrumentor(), ['toplc'])

    def test_names_and_prefix(self):
        here = os.path.dirname(os.path.abspath(__file__))
        env = {'TOPLJAVAC_TOOL_PATH': here, 'TOPLJAVAC_JAVAC_NAME': 'javac8', 'TOPLJAVAC_TOPLC_NAME': 'toplc2'}
        with mock.patch.dict(os.environ, env, clear=True):
            tools = getToolConfig()
        self.assertEqual(tools.getCompiler(), [os.path.join(here, 'javac8')])
        self.assertEqual(tools.getInstrumentor(), [os.path.join(here, 'toplc2')])

    def test_commands_are_fresh_lists(self):
        tools = ToolConfig()
        tools.getCompiler().append('-g')
        self.assertEqual(tools.getCompiler(), ['javac'])

    def test_missing_prefix(self):
        with self.assertRaises(ConfigurationError):
            ToolConfig('/no/such/topljavac/tools')


class LogConfigTest(unittest.TestCase):

    def test_level_from_environment(self):
        with mock.patch.dict(os.environ, {'TOPLJAVAC_OUTPUT_LEVEL': 'info'}):
            logger = logConfig('topljavac.test.info')
        self.assertEqual(logger.level, logging.INFO)

    def test_invalid_level_is_ignored(self):
        with mock.patch.dict(os.environ, {'TOPLJAVAC_OUTPUT_LEVEL': 'chatty'}):
            with self.assertLogs(level='ERROR'):
                logger = logConfig('topljavac.test.chatty')
        self.assertEqual(logger.level, logging.NOTSET)

    def test_requested_level(self):
        for (value, level) in [('debug', logging.DEBUG), ('Warning', logging.WARNING), ('loud', None), ('', None)]:
            with mock.patch.dict(os.environ, {'TOPLJAVAC_OUTPUT_LEVEL': value}):
                self.assertEqual(requestedLevel(), level)

    def test_logging_configuration(self):
        env = {'TOPLJAVAC_OUTPUT_LEVEL': 'DEBUG', 'TOPLJAVAC_OUTPUT_FILE': '/tmp/topljavac.log'}
        with mock.patch.dict(os.environ, env):
            self.assertEqual(loggingConfiguration(), ('/tmp/topljavac.log', 'DEBUG'))


if __name__ == '__main__':
    unittest.main()
