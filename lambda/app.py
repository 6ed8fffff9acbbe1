import os
import logging

logger = logging.getLogger()
logger.setLevel(os.getenv("LOG_LEVEL", "INFO"))

ECHO_MESSAGE_ENV_VAR = "ECHO_MESSAGE"


def load_echo_message(environ=None):
    """Return the configured echo message, or "" when unset or empty."""
    if environ is None:
        environ = os.environ
    return environ.get(ECHO_MESSAGE_ENV_VAR) or ""


def echo(event, context, message=""):
    # event and context are never inspected
    body = message or ""
    logger.debug("echo invoked, message length %d", len(body))
    return {
        "statusCode": 200,
        "body": body
    }


def build_handler(message):
    """Return a Lambda handler that always echoes ``message``.

    Use this instead of ``lambda_handler`` when the message is known up front,
    so no process environment is involved.
    """
    def handler(event, context):
        return echo(event, context, message)
    return handler


def lambda_handler(event, context):
    # read per invocation so the body tracks the current environment
    return echo(event, context, load_echo_message())
