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

__all__ = ["default"]

from resource_management.core.logger import Logger
from resource_management.libraries.script import Script


def default(name, default_value, config=None):
  """
  Look a slash separated path such as '/configurations/kafka-broker/jmx_port'
  up in the command configuration, returning default_value when any part of
  the path is missing.

  @param config: configuration to search, Script.get_config() when None
  """
  subdicts = [x for x in name.split('/') if x]

  curr_dict = Script.get_config() if config is None else config
  if curr_dict is None:
    return default_value
  for x in subdicts:
    if x in curr_dict:
      curr_dict = curr_dict[x]
    else:
      Logger.debug("Cannot find configuration: '%s'. Using '%s' value as default" % (name, default_value))
      return default_value

  return curr_dict
