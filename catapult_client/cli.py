from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from typing import Any, List, Optional, Sequence

from catapult_client.config.endpoint import ApiConfig
from catapult_client.config.settings import get_settings
from catapult_client.core.exceptions import ApiError, ConfigurationError, ExhaustedRetries
from catapult_client.models.request import HttpMethod, RequestDescriptor
from catapult_client.services.api import ApiClient

EXIT_OK = 0
EXIT_UNHEALTHY = 1
EXIT_API_ERROR = 2


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="catapult-client",
        description="Catapult API client (retry + health probe)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--api-url",
        type=str,
        default=None,
        help="Override base API URL (otherwise resolved from API_URL / PAGE_URL / defaults).",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        default=False,
        help="Log retries and health checks to stderr.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("health", help="Check GET {base}/api/health.")

    req = sub.add_parser("request", help="Send a JSON request with retries.")
    req.add_argument("method", type=str.upper, choices=[m.value for m in HttpMethod])
    req.add_argument("path", type=str, help="Path (/api/events) or absolute URL.")
    req.add_argument(
        "--data", "-d",
        type=str,
        default=None,
        help="JSON body for POST/PUT/PATCH.",
    )
    req.add_argument(
        "--retries", "-r",
        type=int,
        default=None,
        help="Retry budget (additional attempts after the first).",
    )
    return parser.parse_args(argv)


def build_config(api_url: Optional[str]) -> ApiConfig:
    settings = get_settings()
    if api_url:
        settings = settings.model_copy(update={"API_URL": api_url})
    return ApiConfig.from_settings(settings)


async def run(args: argparse.Namespace, client: ApiClient) -> int:
    if args.command == "health":
        healthy = await client.check_health()
        print("healthy" if healthy else "unhealthy")
        return EXIT_OK if healthy else EXIT_UNHEALTHY

    body = None
    if args.data is not None:
        # Проверяем JSON до отправки: кривое тело - ошибка пользователя
        body = json.dumps(json.loads(args.data))

    descriptor = RequestDescriptor(
        method=args.method,
        path=args.path,
        body=body,
        retries=client.config.retries if args.retries is None else args.retries,
    )
    result: Any = await client.request(descriptor)
    print(json.dumps(result, ensure_ascii=False, indent=2))
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        client = ApiClient(build_config(args.api_url))
        return asyncio.run(run(args, client))
    except json.JSONDecodeError as e:
        print(f"❌ --data is not valid JSON: {e}", file=sys.stderr)
        return EXIT_API_ERROR
    except ExhaustedRetries as e:
        print(f"❌ {e.message} Last error: {e.last_error!r}", file=sys.stderr)
        return EXIT_API_ERROR
    except ApiError as e:
        status = e.status if e.status is not None else "-"
        print(f"❌ [{status}] {e.message}", file=sys.stderr)
        if e.data:
            print(json.dumps(e.data, ensure_ascii=False), file=sys.stderr)
        return EXIT_API_ERROR
    except ConfigurationError as e:
        print(f"❌ Configuration error: {e}", file=sys.stderr)
        return EXIT_API_ERROR


if __name__ == "__main__":
    raise SystemExit(main())
