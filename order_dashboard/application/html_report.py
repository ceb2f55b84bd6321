"""Renders a dashboard view as a standalone HTML page."""

import html
import os
from datetime import UTC, datetime, tzinfo

from order_dashboard.domain.dashboard import ChartSlice, DashboardView
from order_dashboard.domain.order import Order, OrderStatus

_CSS = """
  * { box-sizing: border-box; margin: 0; padding: 0; }
  body { font-family: system-ui, sans-serif; background: #f8fafc; color: #1e293b; padding: 2rem; }
  h1 { font-size: 1.6rem; margin-bottom: 0.25rem; }
  h2 { font-size: 1.1rem; margin-bottom: 0.75rem; color: #334155; }
  .meta { color: #64748b; font-size: 0.85rem; margin-bottom: 1.5rem; }
  .meta strong { color: #4f46e5; }

  .banner { border-radius: 8px; padding: 0.75rem 1rem; margin-bottom: 1rem; font-size: 0.85rem; }
  .banner-mock  { background: #fffbeb; border: 1px solid #fde68a; color: #92400e; }
  .banner-error { background: #fef2f2; border: 1px solid #fecaca; color: #b91c1c; }

  .filters { display: flex; gap: 1.5rem; align-items: center; background: #fff;
             border-radius: 8px; padding: 0.75rem 1rem; margin-bottom: 1.5rem;
             box-shadow: 0 1px 4px rgba(0,0,0,.06); font-size: 0.85rem; }
  .filters .count { margin-left: auto; color: #94a3b8; }

  .cards { display: grid; grid-template-columns: repeat(6, 1fr); gap: 1rem; margin-bottom: 2rem; }
  .card { background: #fff; border-radius: 8px; padding: 1.25rem 1.5rem;
          box-shadow: 0 1px 4px rgba(0,0,0,.08); }
  .card .value { font-size: 2rem; font-weight: 700; color: #1e293b; }
  .card .label { font-size: 0.8rem; color: #64748b; margin-top: 0.2rem; }

  .chart { background: #fff; border-radius: 8px; padding: 1.25rem 1.5rem;
           box-shadow: 0 1px 4px rgba(0,0,0,.08); margin-bottom: 2rem; }
  .bar-row { display: flex; align-items: center; gap: 0.75rem; margin: 0.4rem 0; font-size: 0.85rem; }
  .bar-row .name { width: 6rem; color: #64748b; }
  .bar-row .bar { height: 1rem; border-radius: 4px; min-width: 2px; }
  .empty { color: #94a3b8; text-align: center; padding: 2rem; }

  table { width: 100%; border-collapse: collapse; background: #fff;
          border-radius: 8px; overflow: hidden;
          box-shadow: 0 1px 4px rgba(0,0,0,.08); margin-bottom: 2rem; }
  th { background: #f1f5f9; color: #475569; text-align: left;
       padding: 0.65rem 1rem; font-size: 0.8rem; text-transform: uppercase;
       letter-spacing: .04em; }
  td { padding: 0.6rem 1rem; font-size: 0.88rem; border-bottom: 1px solid #f1f5f9; }
  tr:last-child td { border-bottom: none; }
  td.subscriber { font-weight: 600; color: #4f46e5; }
  td.mono { font-family: ui-monospace, monospace; }

  .badge { display: inline-block; padding: 2px 8px; border-radius: 99px;
           font-size: 0.75rem; font-weight: 700; border: 1px solid; }
  .badge-confirmed { background: #f0fdf4; color: #16a34a; border-color: #bbf7d0; }
  .badge-escalated { background: #fef2f2; color: #dc2626; border-color: #fecaca; }
  .badge-reminded  { background: #eff6ff; color: #2563eb; border-color: #bfdbfe; }
  .badge-cancelled { background: #f1f5f9; color: #475569; border-color: #e2e8f0; }
  .badge-pending, .badge-unknown { background: #fffbeb; color: #d97706; border-color: #fde68a; }
"""

_CARDS = ("total", "pending", "escalated", "confirmed", "reminded", "cancelled")


def _badge(order: Order) -> str:
    cls = f"badge-{order.normalized_status.lower()}"
    text = order.status or OrderStatus.UNKNOWN
    return f'<span class="badge {cls}">{html.escape(text)}</span>'


def _created(order: Order, tz: tzinfo | None) -> str:
    if order.created_at is None:
        return "<span style='color:#aaa'>—</span>"
    stamp = order.created_at
    if tz is not None:
        stamp = stamp.astimezone(tz) if stamp.tzinfo else stamp.replace(tzinfo=tz)
    return f"{stamp:%Y-%m-%d} <span style='color:#94a3b8'>{stamp:%H:%M}</span>"


def _cards(view: DashboardView) -> str:
    return "".join(
        f"""<div class="card">
          <div class="value">{getattr(view.stats, name)}</div>
          <div class="label">{name.capitalize()}</div>
        </div>"""
        for name in _CARDS
    )


def _chart(slices: list[ChartSlice], total: int) -> str:
    if total == 0:
        return '<div class="empty">No data found</div>'
    peak = max(s.value for s in slices) or 1
    return "".join(
        f"""<div class="bar-row">
          <span class="name">{html.escape(s.name)}</span>
          <span class="bar" style="width:{s.value / peak * 60:.1f}%;background:{s.color}"></span>
          <span>{s.value}</span>
        </div>"""
        for s in slices
    )


def _order_row(o: Order, is_admin: bool, tz: tzinfo | None) -> str:
    subscriber = (
        f'<td class="subscriber">{html.escape(o.subscriber_name)}</td>' if is_admin else ""
    )
    phone = html.escape(o.phone or "")
    return f"""<tr>
          {subscriber}
          <td class="mono">{html.escape(o.order_id)}</td>
          <td>{_created(o, tz)}</td>
          <td>{_badge(o)}</td>
          <td>{phone}</td>
        </tr>"""


def _orders_table(view: DashboardView, tz: tzinfo | None) -> str:
    is_admin = view.identity.is_admin
    rows = "".join(_order_row(o, is_admin, tz) for o in view.filtered_orders)
    if not rows:
        rows = (
            f'<tr><td colspan="{5 if is_admin else 4}" class="empty">'
            "No orders found for this criteria</td></tr>"
        )
    subscriber_header = "<th>Subscriber</th>" if is_admin else ""
    return f"""
    <table>
      <thead><tr>
        {subscriber_header}
        <th>Order ID</th><th>Created At</th><th>Status</th><th>Phone</th>
      </tr></thead>
      <tbody>{rows}</tbody>
    </table>"""


def build_html_report(view: DashboardView, tz: tzinfo | None = None) -> str:
    """Return a complete dashboard page as a string.

    Args:
        view: The recomputed dashboard payload.
        tz:   Zone used to display ``created_at``; timestamps are shown as stored when None.
    """
    generated_at = datetime.now(UTC).strftime("%Y-%m-%d %H:%M:%S UTC")
    date_range = view.filters.date_range
    banners = ""
    if view.mock_mode:
        banners += '<div class="banner banner-mock"><strong>Mock Mode</strong> Supabase keys missing.</div>'
    if view.error:
        banners += f'<div class="banner banner-error">{html.escape(view.error)}</div>'
    subscriber = (
        f"<span>Subscriber: <strong>{html.escape(view.filters.subscriber_filter)}</strong></span>"
        if view.identity.is_admin
        else ""
    )

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{html.escape(view.title)}</title>
  <style>{_CSS}</style>
</head>
<body>
  <h1>{html.escape(view.title)}</h1>
  <p class="meta">User: <strong>{html.escape(view.identity.name)}</strong> · Generated at {generated_at}</p>
  {banners}

  <div class="filters">
    <span>Dates: <strong>{date_range.start.isoformat()}</strong> – <strong>{date_range.end.isoformat()}</strong></span>
    {subscriber}
    <span class="count">Showing {view.showing} of {view.loaded} orders</span>
  </div>

  <div class="cards">{_cards(view)}</div>

  <div class="chart">
    <h2>Status Distribution</h2>
    {_chart(view.chart, view.stats.total)}
  </div>

  <h2>{html.escape(view.table_title)} <small style="color:#94a3b8">Latest 100</small></h2>
  {_orders_table(view, tz)}
</body>
</html>"""


class HtmlReportService:
    """Writes a timestamped dashboard page and returns the file path."""

    def __init__(self, output_dir: str = ".", tz: tzinfo | None = None) -> None:
        self._output_dir = output_dir
        self._tz = tz

    def generate(self, view: DashboardView) -> str:
        timestamp = datetime.now(UTC).strftime("%Y-%m-%dT%H-%M-%S")
        os.makedirs(self._output_dir, exist_ok=True)
        path = os.path.join(self._output_dir, f"dashboard_{timestamp}.html")
        with open(path, "w", encoding="utf-8") as f:
            f.write(build_html_report(view, self._tz))
        return path
