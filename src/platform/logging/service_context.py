"""
Service context for log lines: '{service}@{env}:{instance}'.

Inside a container the instance is the short container hostname, locally it is the PID.
"""

from functools import lru_cache
import os


@lru_cache(maxsize=1)
def get_service_context() -> str:
    service_name = os.getenv('SERVICE_NAME', 'appointment-service')
    deploy_env = os.getenv('DEPLOY_ENV', 'local_dev')

    if os.getenv('RUNNING_IN_CONTAINER', '').lower() == 'true':
        instance = os.getenv('HOSTNAME', 'container')[:12]
    else:
        instance = str(os.getpid())

    return f'{service_name}@{deploy_env}:{instance}'
