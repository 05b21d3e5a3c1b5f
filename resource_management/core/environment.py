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

__all__ = ["Environment"]

from resource_management.core import shell
from resource_management.core.exceptions import Fail
from resource_management.core.logger import Logger
from resource_management.core.providers import find_provider
from resource_management.core.system import System
from resource_management.core.utils import AttributeDictionary


class Environment(object):
  _instances = []

  def __init__(self, basedir=None):
    """
    @param basedir: base directory of the package, templates are looked up
    in its 'templates' sub-directory and static files in 'files'
    """
    self.reset(basedir)

  def reset(self, basedir):
    self.system = System.get_instance()
    self.config = AttributeDictionary()
    self.resources = {}
    self.resource_list = []
    self.update_config({
      'basedir': basedir,
      'params': {},
    })

  def update_config(self, attributes, overwrite=True):
    for key, value in attributes.items():
      attr = self.config
      path = key.split('.')
      for pth in path[:-1]:
        if pth not in attr:
          attr[pth] = AttributeDictionary()
        attr = attr[pth]
      if overwrite or path[-1] not in attr:
        attr[path[-1]] = value

  def set_params(self, arg):
    """
    @param arg: is a dictionary of configurations, or a module with the configurations
    """
    if isinstance(arg, dict):
      variables = arg
    else:
      variables = dict((var, getattr(arg, var)) for var in dir(arg))

    for variable, value in variables.items():
      # don't include system variables, methods, classes, modules
      if not variable.startswith("__") and \
          not hasattr(value, '__call__') and \
          not hasattr(value, '__file__'):
        self.config.params[variable] = value

  def run_action(self, resource, action):
    Logger.debug("Performing action %s on %s" % (action, resource))

    provider_class = find_provider(self, resource.__class__.__name__,
                                   resource.provider)
    provider = provider_class(resource)
    try:
      provider_action = getattr(provider, 'action_%s' % action)
    except AttributeError:
      raise Fail("%r does not implement action %s" % (provider, action))
    provider_action()

  def _check_condition(self, cond):
    if hasattr(cond, '__call__'):
      return cond()

    if isinstance(cond, str) or isinstance(cond, (list, tuple)):
      ret, out = shell.call(cond)
      return ret == 0

    raise Fail("Unknown condition type %r" % cond)

  def ordered_resources(self):
    """
    Declared resources in apply order: every resource comes after the
    resources it requires, ties keep declaration order.
    """
    declared = set(id(resource) for resource in self.resource_list)
    for resource in self.resource_list:
      for requirement in resource.requires:
        if id(requirement) not in declared:
          raise Fail("%s requires %s which is not declared in this environment"
                     % (resource, requirement))

    ordered = []
    done = set()
    pending = list(self.resource_list)
    while pending:
      for resource in pending:
        if all(id(requirement) in done for requirement in resource.requires):
          break
      else:
        raise Fail("Dependency cycle between %s" % ", ".join(str(r) for r in pending))
      pending.remove(resource)
      ordered.append(resource)
      done.add(id(resource))
    return ordered

  def run(self):
    with self:
      for resource in self.ordered_resources():
        Logger.info_resource(resource)

        if resource.not_if is not None and self._check_condition(
          resource.not_if):
          Logger.debug("Skipping %s due to not_if" % resource)
          continue

        if resource.only_if is not None and not self._check_condition(
          resource.only_if):
          Logger.debug("Skipping %s due to only_if" % resource)
          continue

        for action in resource.action:
          if not resource.ignore_failures:
            self.run_action(resource, action)
          else:
            try:
              self.run_action(resource, action)
            except Exception as ex:
              Logger.info("Skipping failure of %s due to ignore_failures. Failure reason: %s" % (resource, str(ex)))
      self.resource_list = []

  @classmethod
  def get_instance(cls):
    if not cls._instances:
      raise Fail("No active Environment, resources must be declared inside 'with Environment(...)'")
    return cls._instances[-1]

  def __enter__(self):
    self.__class__._instances.append(self)
    return self

  def __exit__(self, exc_type, exc_val, exc_tb):
    self.__class__._instances.pop()
    return False
