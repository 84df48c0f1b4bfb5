"""
JSON /correct endpoint and a one-page UI.

Responses carry {"original", "corrected"} (plus "changes" with explain=1).
Clients of the older service that read a "corrige" field must switch to
"corrected"; no alias is emitted.
"""
from __future__ import annotations
import argparse
from flask import Flask, request, jsonify, Response
from speller.engine import Engine
from speller import config as CFG

app = Flask(__name__)
_engine: Engine | None = None


def _truthy(v: str | None) -> bool:
    return (v or "").lower() in ("1", "true", "yes", "on")


# ---------- API ----------
@app.after_request
def _cors(resp: Response) -> Response:
    # Browser front ends on other origins call /correct directly
    resp.headers["Access-Control-Allow-Origin"] = "*"
    return resp


@app.get("/correct")
def api_correct_get():
    text = request.args.get("text", "", type=str)
    explain = _truthy(request.args.get("explain"))
    return _correct(text, explain)


@app.post("/correct")
def api_correct_post():
    body = request.get_json(silent=True)
    if not isinstance(body, dict) or not isinstance(body.get("text"), str):
        return jsonify({"error": 'expected a JSON body {"text": "..."}'}), 400
    return _correct(body["text"], bool(body.get("explain")))


def _correct(text: str, explain: bool):
    if not text:
        return jsonify({"original": "", "corrected": ""})
    if _engine is None or not _engine.ready:
        return jsonify({"error": "model not loaded"}), 503
    return jsonify(_engine.correct(text).to_dict(explain=explain))


@app.get("/health")
def health():
    if _engine is None or not _engine.ready:
        return jsonify({"ok": False}), 503
    s = _engine.stats()
    return jsonify({"ok": True, "words": s["words"], "bigrams": s["bigrams"]})


# ---------- UI ----------
@app.get("/")
def home():
    # One page, no external deps: type, get the corrected sentence back.
    html = r"""
<!doctype html>
<html lang="fr">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>Correcteur • Flask UI</title>
<style>
:root{
  --bg:#0b0f14; --panel:#0f141b; --ink:#cfd8e3; --muted:#8a94a6;
  --accent:#6ee7ff; --border:#1c2530; --fix:rgba(110,231,255,.2);
}
*{box-sizing:border-box}
body{
  margin:0; background:var(--bg); color:var(--ink);
  font:16px/1.45 system-ui,-apple-system,Segoe UI,Roboto,Ubuntu,"Helvetica Neue",Arial;
}
.container{ max-width:860px; margin:24px auto; padding:0 16px }
.card{
  background:var(--panel); border:1px solid var(--border);
  border-radius:16px; padding:18px; box-shadow:0 10px 30px rgba(0,0,0,.25);
}
h1{ font-size:20px; margin:0 0 8px 0 }
textarea{
  width:100%; min-height:90px; padding:12px 14px; border-radius:12px; border:1px solid var(--border);
  background:#0b1117; color:var(--ink); outline:none; font-size:16px; resize:vertical;
}
textarea:focus{ border-color:var(--accent) }
.meta{ color:var(--muted); font-size:13px; margin-top:6px }
.out{
  margin-top:16px; padding:14px; border-radius:12px; border:1px solid var(--border); min-height:3em;
}
.fix{ background:var(--fix); border-bottom:1px solid var(--accent) }
</style>
</head>
<body>
  <div class="container">
    <div class="card">
      <h1>Correcteur orthographique</h1>
      <textarea id="q" placeholder="Tapez une phrase…" autofocus></textarea>
      <div class="meta" id="stats">Prêt.</div>
      <div class="out" id="out"></div>
    </div>
  </div>
<script>
const q = document.querySelector("#q"), out = document.querySelector("#out"), stats = document.querySelector("#stats");
let t;
function esc(s){ return s.replace(/[&<>"]/g, c => ({"&":"&amp;","<":"&lt;",">":"&gt;",'"':"&quot;"}[c])); }
async function run(){
  const text = q.value;
  if(!text.trim()){ out.innerHTML = ""; stats.textContent = "Prêt."; return; }
  const t0 = performance.now();
  try{
    const resp = await fetch(`/correct?explain=1&text=${encodeURIComponent(text)}`);
    const data = await resp.json();
    if(!resp.ok) throw new Error(data.error || `HTTP ${resp.status}`);
    const fixed = new Set((data.changes || []).map(c => c[1]));
    out.innerHTML = data.corrected.split(" ").map(w => fixed.has(w) ? `<span class="fix">${esc(w)}</span>` : esc(w)).join(" ");
    stats.textContent = `${(data.changes || []).length} correction(s) • ~${Math.max(1, Math.round(performance.now() - t0))} ms`;
  }catch(e){
    stats.textContent = `Erreur : ${e.message ?? e}`;
  }
}
q.addEventListener("input", () => { clearTimeout(t); t = setTimeout(run, 200); });
</script>
</body>
</html>
"""
    return Response(html, mimetype="text/html")


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run the correction API on top of Engine")
    mode = ap.add_mutually_exclusive_group()
    mode.add_argument("--build", action="store_true")
    mode.add_argument("--load", action="store_true")
    ap.add_argument("--corpus", nargs="+", default=[CFG.DEFAULT_CORPUS_DIR])
    ap.add_argument("--suffix", default=None)
    ap.add_argument("--model", default=CFG.DEFAULT_MODEL_DSN)  # DSN: file:///x.spm, text:///dir, memory://
    ap.add_argument("--tokens", choices=["whitespace", "tokens"], default=None)
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8080)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    global _engine
    _engine = Engine(request_tokens=args.tokens)
    if args.build:
        _engine.build(args.corpus, store=args.model, suffix=args.suffix, verbose=args.verbose)
    elif args.load:
        _engine.load(args.model, verbose=args.verbose)
    else:
        # no model yet -> train; a missing corpus folder aborts startup
        _engine.initialize(model=args.model, corpus=args.corpus, suffix=args.suffix, verbose=args.verbose)

    try:
        app.run(host=args.host, port=args.port, debug=args.verbose)
    finally:
        _engine.shutdown()
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
