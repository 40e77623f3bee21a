import time
from django.core.cache import cache
from django.http import JsonResponse
from functools import wraps


def parse_rate(rate):
    num, per = rate.split('/')
    periods = {'s': 1, 'm': 60, 'h': 3600, 'd': 86400}
    return int(num), periods.get(per, 60)


def custom_ratelimit(key_func, rate='5/m', block=True):
    """
    Fixed-window rate limiting backed by the Django cache.

    ``rate`` is either a string such as ``'5/m'`` or a callable returning one,
    so limits can be read from settings at request time.
    """

    def decorator(view_func):
        @wraps(view_func)
        def _wrapped_view(request, *args, **kwargs):
            num, window = parse_rate(rate() if callable(rate) else rate)
            key = key_func(request)
            now = int(time.time())
            cache_key = f"rl:{key}"
            data = cache.get(cache_key, {'count': 0, 'start': now})

            if now - data['start'] > window:
                data = {'count': 0, 'start': now}

            data['count'] += 1
            cache.set(cache_key, data, timeout=window)

            if data['count'] > num:
                retry_after = window - (now - data['start'])
                if block:
                    return JsonResponse({
                        "error": f"Too many requests. Retry after {retry_after} seconds.",
                        "retry_after": retry_after
                    }, status=429)
            return view_func(request, *args, **kwargs)
        return _wrapped_view
    return decorator


def ip_key(request):
    return f"ip:{request.META.get('REMOTE_ADDR')}"
