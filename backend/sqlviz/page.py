"""
Page shell — the single HTML document served at "/": the visualizer tab
(server-rendered) and the "Explain with AI" tab. The embedded script relays
IntersectionObserver reports to /api/reveal and posts queries to
/api/explainer.
"""

from html import escape
from typing import TYPE_CHECKING

from sqlviz.renderer import render_visualization

if TYPE_CHECKING:
    from sqlviz.session import VisualizerSession


PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Interactive SQL Visualizer</title>
</head>
<body>
<header><h1>Interactive SQL Visualizer</h1></header>
<main>
    <div class="tabs" role="tablist">
        <button class="tab-button{visualizer_active}" data-tab="visualizer" role="tab">Visualize Queries</button>
        <button class="tab-button{explainer_active}" data-tab="explainer" role="tab">Explain with AI</button>
    </div>
    <div class="tab-content">
        <section id="visualizer"{visualizer_hidden}>{visualization}</section>
        <section id="explainer"{explainer_hidden}>
            <div class="query-explainer">
                <h1>Explain Your SQL with AI</h1>
                <p>Enter any SQL query below and our AI assistant will break it down into a step-by-step explanation.</p>
                <div class="explainer-input-area">
                    <textarea id="query" rows="10" aria-label="SQL Query Input"
                              placeholder="Enter your SQL query here...">{default_query}</textarea>
                    <button id="explain-button">&#10024; Explain with AI</button>
                </div>
                <p class="error-message" id="explain-error"></p>
                <div class="ai-explanation-content" id="explanation" hidden>
                    <h3>AI Explanation</h3>
                    <div id="explanation-body"></div>
                </div>
            </div>
        </section>
    </div>
</main>
<footer><p>A learning tool to make complex SQL concepts intuitive and clear.</p></footer>
<script>
const post = (url, body) => fetch(url, {{
    method: 'POST',
    headers: {{'Content-Type': 'application/json'}},
    body: JSON.stringify(body),
}}).then(r => r.json());

const observer = new IntersectionObserver(entries => {{
    const reports = entries.map(e => ({{key: e.target.dataset.stepKey, ratio: e.intersectionRatio}}));
    post('/api/reveal', {{entries: reports}}).then(data => {{
        document.querySelectorAll('.step').forEach(step => {{
            if (data.revealed.includes(Number(step.dataset.stepIndex))) step.classList.add('visible');
        }});
    }});
}}, {{threshold: {threshold}}});
document.querySelectorAll('.step').forEach(step => observer.observe(step));

const select = (topic, example) => post('/api/select', {{topic, example}}).then(() => location.reload());
document.getElementById('topic-select').addEventListener('change', e => select(e.target.value, 0));
document.getElementById('example-select').addEventListener('change', e =>
    select(document.getElementById('topic-select').value, Number(e.target.value)));

document.querySelectorAll('.tab-button').forEach(button => button.addEventListener('click', () => {{
    document.querySelectorAll('.tab-button').forEach(b => b.classList.toggle('active', b === button));
    document.getElementById('visualizer').hidden = button.dataset.tab !== 'visualizer';
    document.getElementById('explainer').hidden = button.dataset.tab !== 'explainer';
}}));

document.getElementById('explain-button').addEventListener('click', () => {{
    const button = document.getElementById('explain-button');
    const error = document.getElementById('explain-error');
    const panel = document.getElementById('explanation');
    button.disabled = true;
    button.textContent = 'Thinking...';
    error.textContent = '';
    panel.hidden = true;
    post('/api/explainer', {{query: document.getElementById('query').value}}).then(data => {{
        if (data.error) {{
            error.textContent = data.error;
        }} else {{
            document.getElementById('explanation-body').innerHTML = data.explanation;
            panel.hidden = false;
        }}
    }}).catch(err => {{
        error.textContent = `An error occurred: ${{err.message}}`;
    }}).finally(() => {{
        button.disabled = false;
        button.innerHTML = '&#10024; Explain with AI';
    }});
}});
</script>
</body>
</html>
"""


def render_page(
    session: "VisualizerSession",
    default_query: str,
    threshold: float,
    tab: str = "visualizer",
) -> str:
    on_visualizer = tab != "explainer"
    return PAGE_TEMPLATE.format(
        visualization=render_visualization(session),
        default_query=escape(default_query),
        threshold=threshold,
        visualizer_active=" active" if on_visualizer else "",
        explainer_active="" if on_visualizer else " active",
        visualizer_hidden="" if on_visualizer else " hidden",
        explainer_hidden=" hidden" if on_visualizer else "",
    )
