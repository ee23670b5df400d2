# /hello 요청에 호스트 이름을 돌려주는 Flask 앱
from flask import Flask, Response, request
from werkzeug.routing import Rule

from hello_host.metrics import HelloMetrics

HELLO_PATH = '/hello'


def create_app(config):
    """설정을 주입받아 라우트 하나만 가진 앱 생성"""
    app = Flask(__name__)
    metrics = HelloMetrics()
    app.extensions['hello_metrics'] = metrics

    body = f"Hostname: {config.hostname}\n"

    def hello():
        metrics.observe(request.method)
        return Response(body, mimetype='text/plain')

    # methods=None 이면 werkzeug가 모든 메서드를 매칭 - 메서드 필터링 없음
    app.url_map.add(Rule(HELLO_PATH, endpoint='hello', methods=None))
    app.view_functions['hello'] = hello

    return app
