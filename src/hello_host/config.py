# 기동 시점에 한 번만 읽는 환경변수 설정
import os
from dataclasses import dataclass
from typing import Optional


class ConfigError(ValueError):
    """환경변수 값이 잘못된 경우"""


@dataclass(frozen=True)
class Config:
    hostname: str = ''
    host: str = '0.0.0.0'      # 모든 인터페이스
    port: int = 80             # 표준 HTTP 포트 (변경 불가)
    metrics_port: Optional[int] = None

    @classmethod
    def from_env(cls, environ=None):
        """HOSTNAME, METRICS_PORT 환경변수로 설정 생성"""
        if environ is None:
            environ = os.environ
        return cls(
            hostname=environ.get('HOSTNAME', ''),
            metrics_port=_parse_port(environ.get('METRICS_PORT', '')),
        )


def _parse_port(value: str) -> Optional[int]:
    value = value.strip()
    if not value:
        return None
    try:
        port = int(value)
    except ValueError:
        raise ConfigError(f"METRICS_PORT must be an integer: {value!r}") from None
    if not 0 < port < 65536:
        raise ConfigError(f"METRICS_PORT out of range: {port}")
    return port
