from prometheus_client import Counter, Histogram


class AppointmentMetrics:
    """Availability query metrics exposed on /metrics"""

    def __init__(self) -> None:
        self.availability_queries = Counter(
            'availability_queries_total',
            'Total availability queries',
            ['result'],  # result: ok/empty/no_match/invalid_date/error
        )

        self.availability_query_duration = Histogram(
            'availability_query_duration_seconds',
            'Availability query processing time',
            ['result'],
            buckets=[0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5],
        )

        self.eligible_sales_managers = Histogram(
            'availability_eligible_sales_managers',
            'Sales managers matching an availability query',
            buckets=[0, 1, 2, 5, 10, 25, 50, 100],
        )

    def record_query(self, *, result: str, duration: float) -> None:
        self.availability_queries.labels(result=result).inc()
        self.availability_query_duration.labels(result=result).observe(duration)

    def record_eligible(self, *, count: int) -> None:
        self.eligible_sales_managers.observe(count)


# Global metrics instance
metrics = AppointmentMetrics()
