"""Full greeting page: header, tree, snowfall layer and message dialog."""

from __future__ import annotations

import datetime
from html import escape

from wishtree.engine.snowfall import Snowflake
from wishtree.render.svg import render_tree_svg
from wishtree.shell.scene import Scene

CONFETTI_SRC = "https://cdn.jsdelivr.net/npm/canvas-confetti@1.9.3/dist/confetti.browser.min.js"

_STYLE = """
body { margin: 0; min-height: 100vh; overflow-x: hidden; font-family: Georgia, serif;
       background: linear-gradient(to bottom, #b91c1c, #dc2626, #991b1b); color: #fff; }
main { position: relative; z-index: 1; display: flex; flex-direction: column; align-items: center;
       min-height: 100vh; padding: 2rem 1rem; box-sizing: border-box; }
header { text-align: center; }
h1 { font-size: clamp(2rem, 5vw, 3.75rem); margin: 1rem 0 .5rem; text-shadow: 0 4px 8px rgba(0,0,0,.35); }
.subtitle { font-size: 1.2rem; opacity: .9; }
.tree { width: 100%; max-width: 24rem; flex: 1; filter: drop-shadow(0 15px 30px rgba(0,0,0,.35)); }
.ornament, .star[role=button] { cursor: pointer; }
.bob { animation: bob 2.5s ease-in-out infinite; }
.light { animation: blink 2s ease-in-out infinite; mix-blend-mode: screen; transform-box: fill-box;
         transform-origin: center; }
.star-glow { animation: glow 10s ease-in-out infinite; }
@keyframes bob { 0%, 100% { transform: translateY(0); } 50% { transform: translateY(2px); } }
@keyframes blink { 0%, 50%, 100% { opacity: .1; transform: scale(1); }
                   30% { opacity: 1; transform: scale(1.3); } 80% { opacity: 1; transform: scale(1.2); } }
@keyframes glow { 0%, 100% { opacity: .3; } 50% { opacity: 1; } }
.snow { position: fixed; inset: 0; pointer-events: none; overflow: hidden; }
.snowflake { position: absolute; top: -2rem; color: #e2e8f0; animation: fall linear infinite; }
@keyframes fall { to { transform: translateY(110vh); } }
dialog { border: 4px double #facc15; border-radius: .5rem; max-width: 28rem; text-align: center;
         padding: 2rem 1.5rem; color: #1e293b; }
dialog h2 { color: #dc2626; font-size: 1.8rem; margin-top: 0; }
dialog .icon { font-size: 3rem; }
dialog p { font-size: 1.5rem; line-height: 1.8; }
footer { font-size: .875rem; opacity: .8; padding: 1.5rem 0; }
"""

_SCRIPT = """
(function () {
  const dialog = document.getElementById("message-dialog");
  const title = dialog.querySelector("h2");
  const icon = dialog.querySelector(".icon");
  const text = dialog.querySelector("p");

  async function select(el) {
    const rect = el.getBoundingClientRect();
    const raw = el.dataset.target;
    const body = {
      target: raw === "star" ? "star" : Number(raw),
      target_x: rect.left + rect.width / 2,
      target_y: rect.top + rect.height / 2,
      viewport_width: window.innerWidth,
      viewport_height: window.innerHeight,
    };
    let data;
    try {
      const res = await fetch("api/select", {
        method: "POST",
        headers: { "Content-Type": "application/json" },
        body: JSON.stringify(body),
      });
      if (!res.ok) return;
      data = await res.json();
    } catch (err) {
      return;
    }
    title.textContent = data.dialog.title;
    icon.textContent = data.dialog.icon;
    text.textContent = data.dialog.text;
    if (!dialog.open) dialog.showModal();

    try {
      const b = data.burst;
      window.confetti({
        origin: { x: b.origin_x, y: b.origin_y },
        colors: b.colors,
        particleCount: b.particle_count,
        spread: b.spread,
        scalar: b.scalar,
      });
    } catch (err) {
      console.warn("confetti unavailable", err);
    }
  }

  document.querySelectorAll("[data-target][data-message-id]").forEach(function (el) {
    el.addEventListener("click", function () { select(el); });
    el.addEventListener("keydown", function (e) { if (e.key === "Enter") select(el); });
  });

  dialog.addEventListener("close", function () {
    fetch("api/dismiss", { method: "POST" }).catch(function () {});
  });
  dialog.addEventListener("click", function (e) { if (e.target === dialog) dialog.close(); });
})();
"""


def _snowflake(flake: Snowflake) -> str:
    style = (
        f"left: {flake.left_pct:.2f}%; animation-duration: {flake.duration:.2f}s;"
        f" animation-delay: {flake.delay:.2f}s; font-size: {flake.scale:.2f}rem"
    )
    return f'    <div class="snowflake" style="{style}">&#10052;</div>'


def render_page(scene: Scene, title: str, subtitle: str, year: int | None = None) -> str:
    year = year or datetime.date.today().year
    lines = [
        "<!DOCTYPE html>",
        '<html lang="en">',
        "<head>",
        '  <meta charset="utf-8" />',
        '  <meta name="viewport" content="width=device-width, initial-scale=1" />',
        f"  <title>{escape(title)}</title>",
        f"  <style>{_STYLE}</style>",
        f'  <script src="{CONFETTI_SRC}" defer></script>',
        "</head>",
        "<body>",
        '  <div class="snow" aria-hidden="true">',
    ]
    lines += [_snowflake(f) for f in scene.snow]
    lines += [
        "  </div>",
        "  <main>",
        "    <header>",
        f"      <h1>{escape(title)}</h1>",
        f'      <p class="subtitle">{escape(subtitle)}</p>',
        "    </header>",
        render_tree_svg(scene),
        f"    <footer>&copy; {year} Made with &#10084;&#65039; and Christmas spirit</footer>",
        "  </main>",
        '  <dialog id="message-dialog">',
        '    <div class="icon"></div>',
        "    <h2></h2>",
        "    <p></p>",
        '    <form method="dialog"><button>Close</button></form>',
        "  </dialog>",
        f"  <script>{_SCRIPT}</script>",
        "</body>",
        "</html>",
    ]
    return "\n".join(lines)
