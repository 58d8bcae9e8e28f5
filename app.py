import json
import logging

from flask import Flask, request, render_template_string

from indented_output.lua_table import dumps

log = logging.getLogger(__name__)

app = Flask(__name__)

# ─── Indent choices ───────────────────────────────────────────────────────────
INDENT_UNITS = {
    'tab': '\t',
    '2':   '  ',
    '4':   '    ',
}

# ─── HTML Template ────────────────────────────────────────────────────────────
HTML = '''
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <title>JSON → Lua Table</title>
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <style>
    body {
      margin: 0;
      font-family: 'Segoe UI', sans-serif;
      background: #111;
      color: #EEE;
    }
    .container { max-width: 1200px; margin: 2rem auto; padding: 0 1rem; }
    h1 { text-align: center; color: #4A7B8C; }
    .row { display: flex; gap: 2rem; }
    .panel {
      background: #222;
      border: 2px solid #4A7B8C;
      border-radius: 8px;
      display: flex;
      flex-direction: column;
      width: calc(50% - 1rem);
    }
    .panel header { background: #333; padding: .75rem 1rem; font-weight: bold; }
    .panel textarea {
      background: #111;
      color: #CCC;
      padding: 1rem;
      font-family: monospace;
      height: 500px;
      tab-size: 4;
    }
    .controls { text-align: center; margin: 2rem auto; }
    .btn { background: #4A7B8C; color: #111; border: none; padding: .75rem 2rem; font-weight: bold; }
    .error-panel {
      background: #200;
      border: 1px solid #600;
      padding: 1rem;
      color: #f88;
      font-family: monospace;
      white-space: pre-wrap;
    }
  </style>
</head>
<body>
  <div class="container">
    <h1>JSON to Lua Table</h1>
    <form method="POST">
      <div class="row">
        <div class="panel">
          <header>Input</header>
          <textarea name="input_code" required placeholder="Paste JSON here…">{{ input_code }}</textarea>
        </div>
        <div class="panel">
          <header>Output</header>
          <textarea readonly placeholder="Lua table…">{{ output_code }}</textarea>
        </div>
      </div>
      <div class="controls">
        <select name="indent">
          {% for name in indent_units %}
          <option value="{{ name }}" {% if name == indent %}selected{% endif %}>{{ name }}</option>
          {% endfor %}
        </select>
        <button type="submit" class="btn">Convert</button>
      </div>
    </form>

    {% if error %}
    <div class="error-panel"><strong>JSON error:</strong><br>{{ error }}</div>
    {% endif %}
  </div>
</body>
</html>
'''
# ─── Flask Endpoint ───────────────────────────────────────────────────────────
@app.route('/', methods=['GET', 'POST'])
def index():
    input_code  = ''
    output_code = ''
    error       = ''
    indent      = 'tab'

    if request.method == 'POST':
        input_code = request.form['input_code']
        indent = request.form.get('indent', 'tab')
        if indent not in INDENT_UNITS:
            indent = 'tab'

        try:
            data = json.loads(input_code)
        except json.JSONDecodeError as exc:
            log.debug("rejected input: %s", exc)
            error = str(exc)
        else:
            output_code = dumps(data, unit=INDENT_UNITS[indent])

    return render_template_string(
        HTML,
        input_code=input_code,
        output_code=output_code,
        error=error,
        indent=indent,
        indent_units=INDENT_UNITS,
    )

if __name__ == '__main__':
    app.run(debug=True)
