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

__all__ = ["Provider", "find_provider", "get_class_path", "PROVIDERS"]

import importlib
from resource_management.core.exceptions import Fail


class Provider(object):
  def __init__(self, resource):
    self.resource = resource

  def action_nothing(self):
    pass

  def __repr__(self):
    return "%s[%s]" % (self.__class__.__name__, self.resource)


PROVIDERS = dict(
  redhat=dict(),
  debian=dict(),
  suse=dict(),
  default=dict(
    File="resource_management.core.providers.system.FileProvider",
    Directory="resource_management.core.providers.system.DirectoryProvider",
    Service="resource_management.core.providers.service.ServiceProvider",
  ),
)


def get_class_path(os_family, resource_type):
  """
  Dotted path of the provider class for a resource type, the entry of the
  OS family wins over the default one.
  """
  try:
    return PROVIDERS[os_family][resource_type]
  except KeyError:
    try:
      return PROVIDERS["default"][resource_type]
    except KeyError:
      raise Fail("Unable to find provider for %s as %s" % (resource_type, os_family))


def find_provider(env, resource, class_path=None):
  if not class_path:
    class_path = get_class_path(env.system.os_family, resource)

  try:
    mod_path, class_name = class_path.rsplit('.', 1)
  except ValueError:
    raise Fail("Unable to find provider for %s as %s" % (resource, class_path))
  mod = importlib.import_module(mod_path)
  return getattr(mod, class_name)
