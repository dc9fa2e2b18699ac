import logging
import time
import uuid

logger = logging.getLogger("core.request")


class RequestLogMiddleware:
    """Logs one structured line per API request."""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        start_time = time.time()

        request_id = request.headers.get("X-Request-ID", str(uuid.uuid4()))
        request.request_id = request_id

        response = self.get_response(request)

        duration = time.time() - start_time

        x_forwarded_for = request.META.get("HTTP_X_FORWARDED_FOR")
        if x_forwarded_for:
            real_ip = x_forwarded_for.split(",")[0].strip()
        else:
            real_ip = request.META.get("REMOTE_ADDR")

        # DRF authenticates inside the view, so JWT users only show up here
        # when the view set them on the underlying request.
        user_info = "-"
        user = getattr(request, "user", None)
        if user is not None and user.is_authenticated:
            user_info = f"{user.id}:{user.get_username()}"

        response["X-Request-ID"] = request_id

        logger.info({
            "request": f"{request.method} {request.get_full_path()}",
            "status": response.status_code,
            "real_ip": real_ip,
            "user": user_info,
            "request_id": request_id,
            "request_time": f"{duration:.3f}",
        })

        return response
