#!/usr/bin/env python
"""
Licensed to the Apache Software Foundation (ASF) under one
or more contributor license agreements.  See the NOTICE file
distributed with this work for additional information
regarding copyright ownership.  The ASF licenses this file
to you under the Apache License, Version 2.0 (the
"License"); you may not use this file except in compliance
with the License.  You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.

Kafka Broker Package

"""

__all__ = ["Script"]

import json
import logging
import sys
from resource_management.core.environment import Environment
from resource_management.core.exceptions import Fail, ComponentIsNotRunning
from resource_management.core.logger import Logger
from resource_management.libraries.script.config_dictionary import ConfigDictionary

USAGE = """Usage: {0} <COMMAND> <JSON_CONFIG> [BASEDIR] [LOGGING_LEVEL]

<COMMAND> command name, e.g. configure, stop, status
<JSON_CONFIG> path to the command json file
<BASEDIR> package directory holding the 'templates' folder
<LOGGING_LEVEL> log level for stdout, e.g. DEBUG, INFO (default)
"""

SCRIPT_HANDLERS = ("script-stdout", "script-stderr")


class Script(object):
  """
  Executes a command method of a package script. Command methods receive
  the Environment, declare resources into it and the declared resources
  are applied once the method returns.
  """
  config = None

  def execute(self, argv=None, basedir=None):
    """
    Sets up logging;
    Parses command parameters and executes method relevant to command type
    """
    argv = sys.argv if argv is None else argv

    # set up logging (two separate handlers for stderr and stdout with different loglevels)
    logger = Logger.logger
    logger.setLevel(logging.DEBUG)
    # handlers of a previous execute() are replaced, not stacked
    for handler in list(logger.handlers):
      if handler.get_name() in SCRIPT_HANDLERS:
        logger.removeHandler(handler)
    formatter = logging.Formatter('%(asctime)s - %(message)s')
    chout = logging.StreamHandler(sys.stdout)
    chout.set_name("script-stdout")
    chout.setLevel(logging.INFO)
    chout.setFormatter(formatter)
    cherr = logging.StreamHandler(sys.stderr)
    cherr.set_name("script-stderr")
    cherr.setLevel(logging.ERROR)
    cherr.setFormatter(formatter)
    logger.addHandler(cherr)
    logger.addHandler(chout)

    # parse arguments
    if len(argv) < 3:
      logger.error("Script expects at least 2 arguments")
      print(USAGE.format(argv[0]))
      sys.exit(1)

    command_name = argv[1].lower()
    command_data_file = argv[2]
    if len(argv) > 3:
      basedir = argv[3]
    if len(argv) > 4:
      logging_level = logging.getLevelName(argv[4].upper())
      if not isinstance(logging_level, int):
        logger.error("Unknown logging level %s" % argv[4])
        sys.exit(1)
      chout.setLevel(logging_level)

    try:
      with open(command_data_file, "r") as f:
        Script.config = ConfigDictionary(json.load(f))
    except (IOError, ValueError):
      logger.exception("Can not read json file with command parameters: ")
      sys.exit(1)

    # Run class method depending on a command type
    try:
      method = self.choose_method_to_execute(command_name)
      with Environment(basedir) as env:
        method(env)
        env.run()
    except ComponentIsNotRunning:
      # Support of component status checks.
      # Non-zero exit code is interpreted as an INSTALLED status of a component
      sys.exit(1)
    except Fail:
      logger.exception("Error while executing command '{0}':".format(command_name))
      sys.exit(1)

  def choose_method_to_execute(self, command_name):
    """
    Returns a callable object that should be executed for a given command.
    """
    if command_name.startswith("_") or command_name in ("execute", "choose_method_to_execute", "get_config"):
      raise Fail("Script '{0}' has no command '{1}'".format(self.__class__.__name__, command_name))
    method = getattr(self, command_name, None)
    if method is None or not hasattr(method, "__call__"):
      raise Fail("Script '{0}' has no command '{1}'".format(self.__class__.__name__, command_name))
    return method

  @staticmethod
  def get_config():
    """
    Command configuration loaded by execute(), None outside of a command.
    """
    return Script.config

  def configure(self, env):
    self.fail_with_error("configure method isn't implemented")

  def start(self, env):
    self.fail_with_error("start method isn't implemented")

  def stop(self, env):
    self.fail_with_error("stop method isn't implemented")

  def status(self, env):
    self.fail_with_error("status method isn't implemented")

  def fail_with_error(self, message):
    raise Fail("Error: " + message)
