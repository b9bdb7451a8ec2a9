"""
Behave environment configuration for the Kogito build scenarios.

Each scenario gets its own ScenarioData bound to the namespace given with
`-D namespace=<ns>` (default: kogito-bdd) and the config file given with
`-D config=<path>` or the KOGITO_STEPS_CONFIG environment variable.
"""

import logging
import os

from kogitosteps import Config, ClusterClient, ScenarioData
from kogitosteps.constants import CONFIG_PATH_ENV
from kogitosteps.utils import setup_logger

logger = logging.getLogger("kogitosteps.features")


def before_all(context):
    """Load configuration and connect to the cluster once per run."""
    userdata = context.config.userdata
    setup_logger(debug=userdata.getbool("debug", False))

    context.kogito_config = Config(userdata.get("config", os.environ.get(CONFIG_PATH_ENV)))
    context.cluster = ClusterClient.from_config(context.kogito_config.cluster)
    context.namespace = userdata.get("namespace", "kogito-bdd")
    logger.info(f"Running scenarios in namespace '{context.namespace}'")


def before_scenario(context, scenario):
    context.data = ScenarioData.from_config(context.namespace, context.kogito_config, context.cluster)
    logger.info(f"Starting scenario: {scenario.name}")


def after_scenario(context, scenario):
    logger.info(f"Completed scenario: {scenario.name} ({scenario.status.name})")
