# Licensed to the Apache Software Foundation (ASF) under one or more
# contributor license agreements.  See the NOTICE file distributed with
# this work for additional information regarding copyright ownership.
# The ASF licenses this file to You under the Apache License, Version 2.0
# (the "License"); you may not use this file except in compliance with
# the License.  You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import os
import pprint
from resource_management import *
from resource_management.core.providers import find_provider
from kafka_broker.kafka_server import kafka_server, SERVICE_NAME
from kafka_broker.params import broker_config_from_command

PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))


class Kafka(Script):
  def configure(self, env):
    config = broker_config_from_command(Script.get_config())

    # log the broker configuration
    ppp = pprint.PrettyPrinter(indent=4)
    Logger.info("broker %s config: %s" % (config.broker_id, ppp.pformat(config.as_dict())))

    kafka_server(config, env)

  def stop(self, env):
    Service(SERVICE_NAME, action="stop")

  def status(self, env):
    service = Service(SERVICE_NAME, action="nothing")
    provider_class = find_provider(env, "Service", service.provider)
    if not provider_class(service).status():
      raise ComponentIsNotRunning()


def main():
  Kafka().execute(basedir=PACKAGE_DIR)


if __name__ == "__main__":
  main()
