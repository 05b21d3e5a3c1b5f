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

from resource_management import *

SERVICE_NAME = "kafka"
LOG_DIR_MODE = 0o755
CONFIG_FILE_MODE = 0o644


def kafka_server(config, env=None):
  """
  Declare the resources of the broker described by config into the active
  Environment and return the kafka Service.

  The service requires the default file, both property files and every log
  directory. It is not restarted when one of them changes.
  """
  env = env or Environment.get_instance()
  env.set_params(config.as_dict())

  default_env = File(config.default_file,
    content=Template(config.default_template),
    mode=CONFIG_FILE_MODE,
  )

  server_conf = File(format("{kafka_config_dir}/server.properties"),
    content=Template(config.server_properties_template),
    mode=CONFIG_FILE_MODE,
  )

  log4j_conf = File(format("{kafka_config_dir}/log4j.properties"),
    content=Template(config.log4j_properties_template),
    mode=CONFIG_FILE_MODE,
  )

  Directory(config.log_dirs,
    owner=config.kafka_user,
    group=config.kafka_group,
    mode=LOG_DIR_MODE,
    recursive=True,
  )
  log_dir_resources = [env.resources['Directory'][path] for path in config.log_dirs]

  return Service(SERVICE_NAME,
    action=config.service_action,
    requires=[default_env, server_conf, log4j_conf] + log_dir_resources,
  )
