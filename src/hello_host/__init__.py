# HOSTNAME 환경변수를 응답하는 최소 웹앱
from hello_host.app import create_app
from hello_host.config import Config, ConfigError

__all__ = ['create_app', 'Config', 'ConfigError']
