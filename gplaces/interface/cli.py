import argparse
import json
import logging
import sys
from dataclasses import asdict

import backoff
import requests

from gplaces.app.use_cases.collect_places import CollectPlacesUseCase
from gplaces.app.use_cases.enrich_details import EnrichDetailsUseCase
from gplaces.core.errors import ApiError, PlacesError
from gplaces.core.status import is_unknown, is_zero_results
from gplaces.core.types import PriceLevel, RankBy
from gplaces.infrastructure.providers.places.service import Service
from gplaces.utils.config import Settings, load_env, load_settings
from gplaces.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def _give_up(exc: Exception) -> bool:
    # retry transport failures and UNKNOWN_ERROR, nothing else
    if isinstance(exc, requests.RequestException):
        return False
    return not is_unknown(exc)


@backoff.on_exception(
    backoff.expo, (requests.RequestException, ApiError), max_time=60, giveup=_give_up
)
def fetch_with_retry(call):
    return call.do()


def build_container():
    load_env()
    settings = load_settings()
    setup_logging(settings.log_level)
    service = Service(requests.Session(), settings.api_key, timeout=settings.timeout_sec)
    service.set_url(settings.base_url)
    return settings, service


def _location(s: str) -> tuple[float, float]:
    try:
        lat, lng = map(float, s.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f'expected "lat,lng", got {s!r}')
    return lat, lng


def _price(s: str) -> PriceLevel:
    try:
        return PriceLevel(int(s))
    except ValueError:
        raise argparse.ArgumentTypeError(f"price level must be 0-4, got {s!r}")


def _add_filter_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--type", dest="types", action="append", default=[], help='e.g. "cafe"')
    p.add_argument("--min-price", type=_price, default=None)
    p.add_argument("--max-price", type=_price, default=None)
    p.add_argument("--open-now", action="store_true")
    p.add_argument("--zagat", action="store_true")


def _add_output_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--max-pages", type=int, default=None)
    p.add_argument("--details", action="store_true", help="fetch Place Details for every hit")
    p.add_argument("--json", action="store_true")


def parse_args(argv=None):
    ap = argparse.ArgumentParser(prog="gplaces", description="Google Places Web Service client")
    sub = ap.add_subparsers(dest="cmd", required=True)

    p1 = sub.add_parser("nearby")
    p1.add_argument("--location", type=_location, required=True, help="lat,lng")
    p1.add_argument("--radius", type=float, default=0)
    p1.add_argument("--rank-by", choices=[r.value for r in RankBy], default=None)
    p1.add_argument("--keyword", default="")
    p1.add_argument("--name", default="")
    p1.add_argument("--language", default="")
    _add_filter_args(p1)
    _add_output_args(p1)

    p2 = sub.add_parser("textsearch")
    p2.add_argument("query")
    p2.add_argument("--location", type=_location, default=None, help="lat,lng")
    p2.add_argument("--radius", type=float, default=0)
    p2.add_argument("--language", default="")
    _add_filter_args(p2)
    _add_output_args(p2)

    p3 = sub.add_parser("radar")
    p3.add_argument("--location", type=_location, required=True, help="lat,lng")
    p3.add_argument("--radius", type=float, required=True)
    p3.add_argument("--keyword", default="")
    p3.add_argument("--language", default="")
    _add_filter_args(p3)
    _add_output_args(p3)

    p4 = sub.add_parser("details")
    p4.add_argument("place_id")
    p4.add_argument("--language", default="")
    p4.add_argument("--extensions", default="")
    p4.add_argument("--json", action="store_true")

    return ap.parse_args(argv)


def build_search_call(service: Service, args):
    if args.cmd == "nearby":
        call = service.nearby(*args.location)
        call.radius = args.radius
        call.rank_by = RankBy(args.rank_by) if args.rank_by else None
        call.keyword = args.keyword
        call.name = args.name
        call.language = args.language
    elif args.cmd == "textsearch":
        call = service.text_search(args.query)
        if args.location:
            call.lat, call.lng = args.location
        call.radius = args.radius
        call.language = args.language
    else:
        call = service.radar_search(args.radius, *args.location)
        call.keyword = args.keyword

    call.types = list(args.types)
    call.min_price = args.min_price
    call.max_price = args.max_price
    call.open_now = args.open_now
    call.zagat_selected = args.zagat
    return call


def _print_places(places, as_json: bool) -> None:
    if as_json:
        print(json.dumps([asdict(p) for p in places], indent=2, ensure_ascii=False))
        return
    for p in places:
        print(p.name)


def run(args, settings: Settings, service: Service) -> int:
    if args.cmd == "details":
        call = service.details(args.place_id)
        call.language = args.language
        call.extensions = args.extensions
        place = fetch_with_retry(call).result
        if args.json:
            _print_places([place], True)
        else:
            print(f"{place.name} | {place.formatted_address or '-'} | {place.website or '-'}")
        return 0

    uc = CollectPlacesUseCase(
        fetch=fetch_with_retry,
        page_delay=settings.page_delay_sec,
        max_pages=args.max_pages or settings.max_pages,
    )
    collected = uc.run(build_search_call(service, args))
    logger.info(f"{len(collected.results)} results in {collected.pages} page(s)")

    places = collected.results
    if args.details:
        places = EnrichDetailsUseCase(service, language=args.language).run(places)
    _print_places(places, args.json)
    return 0


def main(argv=None) -> int:
    args = parse_args(argv)
    settings, service = build_container()

    try:
        return run(args, settings, service)
    except ApiError as exc:
        if is_zero_results(exc):
            print("no results")
            return 0
        print(f"error: {exc}", file=sys.stderr)
    except (PlacesError, requests.RequestException) as exc:
        print(f"error: {exc}", file=sys.stderr)
    finally:
        service.client.close()
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
