"""
Core package — Shared context, HTTP client and step runners.

  context.py       SeederContext: key/value store shared by every step
  http_client.py   SeederHttpClient: requests wrapper with token injection and hooks
  errors.py        RequestFailed, MissingPrerequisite, CallbackFault, ConfigurationError
  config.py        SeederConfig loaded from .env / environment
  orchestrator.py  Step and SeederOrchestrator (batch mode)
  session.py       CliSession: context + client kept alive for the interactive CLI
  menu.py          Prompts for the interactive CLI
  actions.py       Menu actions, including list-selection sub-pipelines
"""

from .context import SeederContext
from .errors import (
    SeederError,
    RequestFailed,
    MissingPrerequisite,
    CallbackFault,
    ConfigurationError,
)
from .http_client import SeederHttpClient
from .config import SeederConfig, Credentials, load_config
from .orchestrator import Step, SeederOrchestrator
from .session import CliSession
