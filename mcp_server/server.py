"""Terrain MCP Server — exposes market-sizing tools for AI agents.

Wraps the Terrain REST API so an agent can look up indications and run
market-sizing analyses via the Model Context Protocol.

Usage:
    python -m mcp_server.server
"""

import json
from typing import List, Optional

import httpx
from mcp.server.fastmcp import FastMCP

from terrain.settings import API_BASE

from .system_prompt import SYSTEM_PROMPT

mcp = FastMCP("Terrain", instructions=SYSTEM_PROMPT)


def _api(method: str, path: str, **kwargs) -> dict | list:
    """Make a synchronous API call to the Terrain backend."""
    url = f"{API_BASE}{path}"
    with httpx.Client(timeout=60) as client:
        if method == "GET":
            resp = client.get(url, params=kwargs.get("params"))
        elif method == "POST":
            resp = client.post(url, json=kwargs.get("json"))
        else:
            raise ValueError(f"Unknown method: {method}")

    if resp.status_code >= 400:
        return {"error": f"API returned {resp.status_code}: {resp.text}"}
    return resp.json()


def _money(metric: dict) -> str:
    return f"${metric['value']:,.2f}{metric['unit']}"


def format_market_summary(report: dict) -> str:
    """Condense a MarketSizingOutput payload into an agent-readable brief."""
    summary = report["summary"]
    funnel = report["patient_funnel"]
    pricing = report["pricing_analysis"]
    peak = summary["peak_sales_estimate"]
    lines = [
        f"# {report['indication']} ({report['therapy_area']})",
        f"US TAM {_money(summary['tam_us'])} | SAM {_money(summary['sam_us'])} | "
        f"SOM {_money(summary['som_us'])} | Global TAM {_money(summary['global_tam'])}",
        f"Peak sales (USD mm): bear {peak['low']:,.1f} / base {peak['base']:,.1f} / bull {peak['high']:,.1f}",
        f"Market CAGR {summary['cagr_5yr']:.1f}%. Drivers: {summary['market_growth_driver']}",
        f"Funnel: prevalence {funnel['us_prevalence']:,} -> diagnosed {funnel['diagnosed']:,} -> "
        f"treated {funnel['treated']:,} -> addressable {funnel['addressable']:,} -> "
        f"capturable {funnel['capturable']:,}",
        f"WAC tiers: {pricing['recommended_wac']['conservative']:,.0f} / "
        f"{pricing['recommended_wac']['base']:,.0f} / {pricing['recommended_wac']['premium']:,.0f} "
        f"(gross-to-net {pricing['gross_to_net_estimate']:.0%})",
        "Territories:",
    ]
    for territory in report["geography_breakdown"]:
        lines.append(
            f"- {territory['territory']}: TAM {_money(territory['tam'])}, "
            f"SAM {_money(territory['sam'])}, SOM {_money(territory['som'])}"
        )
    context = report["competitive_context"]
    lines.append(f"Competition: crowding {context['crowding_score']}/10. {context['differentiation_note']}")
    return "\n".join(lines)


# ============ TOOLS ============

@mcp.tool()
def analyze_market(
    indication: str,
    geography: List[str],
    development_stage: str,
    pricing_assumption: str = "base",
    launch_year: int = 2028,
    mechanism: Optional[str] = None,
    patient_segment: Optional[str] = None,
    subtype: Optional[str] = None,
    molecular_target: Optional[str] = None,
) -> str:
    """Size the market for an indication: funnel, TAM/SAM/SOM by territory, pricing, and peak sales."""
    body = {
        "indication": indication,
        "geography": geography,
        "development_stage": development_stage,
        "pricing_assumption": pricing_assumption,
        "launch_year": launch_year,
        "mechanism": mechanism,
        "patient_segment": patient_segment,
        "subtype": subtype,
        "molecular_target": molecular_target,
    }
    result = _api("POST", "/api/analyze/market", json={k: v for k, v in body.items() if v is not None})
    if isinstance(result, dict) and "error" in result:
        return json.dumps(result)
    return format_market_summary(result["data"])


@mcp.tool()
def search_indications(query: str, limit: int = 10) -> str:
    """Find supported indications matching a partial name or synonym."""
    matches = _api("GET", "/api/indications", params={"q": query, "limit": limit})
    if isinstance(matches, dict) and "error" in matches:
        return json.dumps(matches)
    if not matches:
        return f"No indications found matching '{query}'"
    return "\n".join(
        f"{m['name']} | {m['therapy_area']} | matched on '{m['matched_on']}' ({m['score']:.2f})"
        for m in matches
    )


@mcp.tool()
def get_indication(name: str) -> str:
    """Get the epidemiology reference record for an indication or synonym."""
    result = _api("GET", f"/api/indications/{name}")
    return json.dumps(result, indent=2)


if __name__ == "__main__":
    mcp.run()
