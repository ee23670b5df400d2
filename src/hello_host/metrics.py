# Prometheus 메트릭 - 앱마다 별도 레지스트리 사용
from prometheus_client import CollectorRegistry, Counter, start_http_server


class HelloMetrics:
    def __init__(self):
        self.registry = CollectorRegistry()
        self.request_count = Counter(
            'hello_requests_total',
            'Total number of requests served on /hello',
            ['method'],
            registry=self.registry
        )

    def observe(self, method):
        self.request_count.labels(method=method).inc()

    def serve(self, port, addr='0.0.0.0'):
        """메인 포트와 분리된 포트에서 메트릭 노출"""
        return start_http_server(port, addr=addr, registry=self.registry)
