import asyncio

from boc_rate_graph import BOCRatesClient, ExchangeRateGraph, Ready, __version__
from boc_rate_graph.view import save_figure

print(__version__)  # 0.1.0

# Default Usage: one fetch, then render
graph = ExchangeRateGraph()
state = graph.load()
print(graph.render_text())

if isinstance(state, Ready):
    print(state.domain)
    # => RateDomain(min_rate=454, max_rate=472)
    save_figure(graph.render_figure(), "boc_rates.png")

# Custom host with a bounded request
with BOCRatesClient("http://localhost:8081", timeout=10) as client:
    print(ExchangeRateGraph(client).load())


# Inside an application that already runs an event loop
async def show_latest() -> None:
    widget = ExchangeRateGraph()
    task = widget.mount()
    try:
        await asyncio.wait_for(asyncio.shield(task), timeout=30)
    except asyncio.TimeoutError:
        pass
    finally:
        # A response arriving after this point is discarded.
        widget.unmount()
    print(widget.render_text())


asyncio.run(show_latest())
