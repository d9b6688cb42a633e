"""
API Lambda Function - Entry point for the device monitor read API.

This module serves as the Lambda function entry point that delegates to the
viewr API handler.
"""

import os
import sys
from typing import Any, Dict

# Add the viewr package to the Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from aws_lambda_powertools.utilities.typing import LambdaContext
from viewr.handlers.api_handler import lambda_handler as api_handler


def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """
    Lambda function entry point for the device monitor read API.

    Args:
        event: Lambda event payload (API Gateway event)
        context: Lambda context object

    Returns:
        API Gateway response dictionary
    """
    return api_handler(event, context)
