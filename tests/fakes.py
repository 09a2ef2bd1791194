import json

import httpx


BOOKING_URL = "https://api.site.com/book"
APPROVAL_URL = "https://api.site.com/approve"


class ScriptedRandom:
    """randint() that replays fixed values, for predictable barcodes."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def randint(self, a, b):
        value = self.values[self.calls]
        self.calls += 1
        assert a <= value <= b
        return value


class FakeExternalApis:
    """
    Stand-in for the booking and approval APIs.
    Scripted responses are served in order; the last one repeats.
    """

    def __init__(self):
        self.booking_responses = [(200, {"message": "order successfully booked"})]
        self.approval_responses = [(200, {"message": "order successfully approved"})]
        self.booking_requests: list[dict] = []
        self.approval_requests: list[dict] = []

    def book_with(self, *responses):
        self.booking_responses = list(responses)

    def approve_with(self, *responses):
        self.approval_responses = list(responses)

    def handler(self, request: httpx.Request) -> httpx.Response:
        payload = json.loads(request.content)
        if str(request.url) == BOOKING_URL:
            self.booking_requests.append(payload)
            return self._respond(self.booking_responses, len(self.booking_requests), request)
        if str(request.url) == APPROVAL_URL:
            self.approval_requests.append(payload)
            return self._respond(self.approval_responses, len(self.approval_requests), request)
        return httpx.Response(404, json={"error": "unknown endpoint"})

    @staticmethod
    def _respond(responses, call_number, request):
        scripted = responses[min(call_number, len(responses)) - 1]
        if callable(scripted):
            return scripted(request)
        status_code, body = scripted
        if isinstance(body, (dict, list)):
            return httpx.Response(status_code, json=body)
        return httpx.Response(status_code, text=body)

