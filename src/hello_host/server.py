# 서버 기동 - 바인드 실패 시 프로세스 비정상 종료
import logging

from werkzeug.serving import WSGIRequestHandler, make_server

from hello_host.app import create_app
from hello_host.config import Config

logger = logging.getLogger(__name__)


class QuietRequestHandler(WSGIRequestHandler):
    """요청별 접근 로그를 남기지 않음"""

    def log_request(self, code='-', size='-'):
        pass


def build_server(app, config: Config):
    """포트 바인드까지 수행. 실패하면 werkzeug가 SystemExit(1) 발생"""
    return make_server(
        config.host,
        config.port,
        app,
        threaded=True,
        request_handler=QuietRequestHandler
    )


def run(config=None):
    if config is None:
        config = Config.from_env()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s"
    )

    app = create_app(config)
    logger.info("I am going to start...")
    server = build_server(app, config)

    if config.metrics_port is not None:
        app.extensions['hello_metrics'].serve(config.metrics_port, addr=config.host)

    server.serve_forever()
