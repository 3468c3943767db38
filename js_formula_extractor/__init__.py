"""Core logic for the JS Formula Extractor.

The Gradio UI lives in `app.py`. This package contains the pieces that:
- read a transaction/activity definition exported as JSON
- extract calculated-field formulas from its header and line sections
- write one `.js` file per formula, reporting progress to a sink
"""
