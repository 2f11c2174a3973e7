"""
Inspection CLI

Locate navigation regions on live pages and print what was found.

Usage:
    navaudit-inspect https://shop.example.com
    navaudit-inspect https://shop.example.com --region mobile-nav --exercise
    navaudit-inspect https://a.example https://b.example --region footer --json
"""

import argparse
import asyncio
import json
import sys
from typing import Any, Dict, List, Optional

from playwright.async_api import Error as PlaywrightError

from ..browser_setup import open_page
from ..config import Config, config
from ..diagnostics import enable_diagnostics, get_logger
from ..dom import probes
from ..exceptions import ConfigError, NavAuditError
from ..interaction import (
    close_mobile_nav_detailed,
    dismiss_popups,
    dismiss_region_prompts,
    is_mobile_nav_open,
    open_mobile_nav,
)
from ..navigation import navigate_with_fallback
from ..regions import MobileNavDescriptor, RegionKind, classify

logger = get_logger(__name__)

ALL_REGIONS = "all"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="navaudit-inspect",
        description="Locate primary navigation, footer and mobile navigation on web pages",
    )
    parser.add_argument("urls", nargs="+", metavar="URL", help="Page(s) to inspect")
    parser.add_argument("-r", "--region", default=ALL_REGIONS,
                        choices=[kind.value for kind in RegionKind] + [ALL_REGIONS],
                        help="Region to locate (default: all)")
    parser.add_argument("-m", "--mobile", action="store_true",
                        help="Use the mobile viewport for every region")
    parser.add_argument("-x", "--exercise", action="store_true",
                        help="Open and close the mobile nav and report each step")
    parser.add_argument("--json", action="store_true", dest="as_json",
                        help="Print results as JSON")
    parser.add_argument("--headed", action="store_true",
                        help="Show the browser window")
    parser.add_argument("-t", "--timeout", type=int, default=None, metavar="MS",
                        help=f"Navigation timeout in ms (default: {config.navigation_timeout_ms})")
    return parser


def requested_regions(region: str) -> List[RegionKind]:
    if region == ALL_REGIONS:
        return list(RegionKind)
    return [RegionKind(region)]


def viewport_groups(regions: List[RegionKind], force_mobile: bool) -> Dict[bool, List[RegionKind]]:
    """Regions keyed by whether they need the mobile viewport"""
    groups: Dict[bool, List[RegionKind]] = {}
    for region in regions:
        mobile = force_mobile or region is RegionKind.MOBILE_NAV
        groups.setdefault(mobile, []).append(region)
    return groups


async def describe_node(node) -> Dict[str, Any]:
    try:
        tag = await probes.tag_name(node)
    except PlaywrightError:
        tag = "?"
    return {
        "tag": tag,
        "classes": await probes.attr(node, "class") or "",
        "aria_label": await probes.attr(node, "aria-label"),
    }


async def describe_result(result) -> Optional[Dict[str, Any]]:
    if result is None:
        return None
    if isinstance(result, MobileNavDescriptor):
        summary = await describe_node(result.drawer)
        summary.update({
            "pattern": result.pattern.value,
            "score": result.score,
            "reasons": list(result.reasons),
            "trigger": await describe_node(result.trigger),
        })
        return summary
    return await describe_node(result)


async def exercise_mobile_nav(descriptor: MobileNavDescriptor) -> Dict[str, Any]:
    """open -> is_open -> close -> is_open"""
    await open_mobile_nav(descriptor, logger)
    opened = await is_mobile_nav_open(descriptor)
    outcome = await close_mobile_nav_detailed(descriptor, logger)
    still_open = await is_mobile_nav_open(descriptor)
    return {
        "opened": opened,
        "close_outcome": outcome.value,
        "closed": not still_open,
    }


async def inspect_page(page, url: str, regions: List[RegionKind], exercise: bool,
                       timeout: Optional[int]) -> Dict[str, Any]:
    outcome = await navigate_with_fallback(page, url, timeout=timeout, label="inspect")
    await dismiss_region_prompts(page, logger)
    await dismiss_popups(page, logger)

    found: Dict[str, Any] = {}
    for region in regions:
        result = await classify(region, page, logger)
        found[region.value] = await describe_result(result)
        if exercise and region is RegionKind.MOBILE_NAV and result is not None:
            found[region.value]["exercise"] = await exercise_mobile_nav(result)
    return {"url": url, "final_url": outcome.final_url, "regions": found}


async def inspect_url(url: str, regions: List[RegionKind], args, cfg: Optional[Config] = None) -> Dict[str, Any]:
    cfg = cfg or config
    timeout = args.timeout if args.timeout is not None else cfg.navigation_timeout_ms
    report: Dict[str, Any] = {"url": url, "final_url": url, "regions": {}}
    for mobile, group in viewport_groups(regions, args.mobile).items():
        headless = False if args.headed else cfg.headless
        async with open_page(mobile=mobile, headless=headless, cfg=cfg) as page:
            partial = await inspect_page(page, url, group, args.exercise, timeout)
        report["final_url"] = partial["final_url"]
        report["regions"].update(partial["regions"])
    # Keep the requested order regardless of viewport grouping
    report["regions"] = {r.value: report["regions"].get(r.value) for r in regions}
    return report


async def run(args, cfg: Optional[Config] = None) -> List[Dict[str, Any]]:
    regions = requested_regions(args.region)
    reports = []
    for url in args.urls:
        try:
            reports.append(await inspect_url(url, regions, args, cfg))
        except NavAuditError as e:
            logger.error(str(e))
            reports.append({"url": url, "error": str(e), "regions": {r.value: None for r in regions}})
    return reports


def all_found(reports: List[Dict[str, Any]]) -> bool:
    return all(
        "error" not in report and all(found is not None for found in report["regions"].values())
        for report in reports
    )


def print_report(report: Dict[str, Any]) -> None:
    print(f"\n🌐 {report['url']}")
    if report.get("error"):
        print(f"   ❌ {report['error']}")
        return
    if report.get("final_url") and report["final_url"] != report["url"]:
        print(f"   ↪ redirected to {report['final_url']}")
    for region, found in report["regions"].items():
        if found is None:
            print(f"   ❌ {region}: not found")
            continue
        label = f" aria-label=\"{found['aria_label']}\"" if found.get("aria_label") else ""
        print(f"   ✅ {region}: <{found['tag']} class=\"{found['classes']}\"{label}>")
        if "pattern" in found:
            print(f"      pattern={found['pattern']} score={found['score']}")
            for reason in found["reasons"]:
                print(f"        {reason}")
        if "exercise" in found:
            ex = found["exercise"]
            print(f"      opened={ex['opened']} close={ex['close_outcome']} closed={ex['closed']}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.timeout is not None and args.timeout <= 0:
        parser.error("--timeout must be a positive number of milliseconds")

    try:
        cfg = Config.from_env()
    except ConfigError as e:
        parser.error(str(e))

    enable_diagnostics("DEBUG" if cfg.debug else cfg.log_level)
    logger.debug(f"Configuration: {cfg.as_env_map()}")

    reports = asyncio.run(run(args, cfg))

    if args.as_json:
        print(json.dumps(reports, indent=2, ensure_ascii=False))
    else:
        for report in reports:
            print_report(report)

    return 0 if all_found(reports) else 1


if __name__ == "__main__":
    sys.exit(main())
