"""
Step definitions binding the Kogito scenario phrases to their handlers.
"""

from behave import step, use_step_matcher

from kogitosteps.steps import (
    BUILD_BINARY_SERVICE_STEP,
    BUILD_EXAMPLE_SERVICE_STEP,
    OPERATOR_DEPLOYED_STEP,
)

use_step_matcher("re")


@step(BUILD_EXAMPLE_SERVICE_STEP)
def step_build_example_service(context, runtime_type, context_dir):
    """Build an example service from the examples repository."""
    context.data.build_example_service_with_configuration(runtime_type, context_dir, table=context.table)


@step(BUILD_BINARY_SERVICE_STEP)
def step_build_binary_service(context, runtime_type, service_name):
    """Create a binary build for a service."""
    context.data.build_binary_service_with_configuration(runtime_type, service_name, table=context.table)


@step(OPERATOR_DEPLOYED_STEP)
def step_operator_is_deployed(context):
    """Install the Kogito operator into the scenario namespace."""
    context.data.kogito_operator_is_deployed()
