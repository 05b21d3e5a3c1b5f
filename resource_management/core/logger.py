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

__all__ = ["Logger"]

import logging

MESSAGE_MAX_LEN = 256


class Logger:
  logger = logging.getLogger("resource_management")

  @staticmethod
  def error(text):
    Logger.logger.error(text)

  @staticmethod
  def exception(text):
    Logger.logger.exception(text)

  @staticmethod
  def warning(text):
    Logger.logger.warning(text)

  @staticmethod
  def info(text):
    Logger.logger.info(text)

  @staticmethod
  def debug(text):
    Logger.logger.debug(text)

  @staticmethod
  def info_resource(resource):
    Logger.info(Logger._get_resource_repr(resource))

  @staticmethod
  def _get_resource_repr(resource):
    arguments_str = ""
    for x, y in sorted(resource.arguments.items()):
      # don't show long messages
      if len(repr(y)) > MESSAGE_MAX_LEN:
        val = '...'
      else:
        val = repr(y)

      arguments_str += "'{0}': {1}, ".format(x, val)

    if arguments_str:
      arguments_str = arguments_str[:-2]

    return "{0} {{{1}}}".format(resource, arguments_str)
