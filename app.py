import gradio as gr

from js_formula_extractor.handlers import (
    handle_input_change,
    load_initial_state,
    run_extraction_handler,
)
from js_formula_extractor.logging_utils import setup_logging

# --- UI Definition ---
with gr.Blocks(title="JS Formula Extractor") as demo:
    gr.Markdown("# Transaction/Activity JSON → JS files")
    gr.Markdown("Extract calculated-field formulas into one `.js` file per field, grouped by section.")

    with gr.Row():
        # Left Panel: Input & Options
        with gr.Column(scale=1):
            gr.Markdown("### 1. Select files")
            input_path = gr.Textbox(label="JSON File", placeholder="/path/to/transaction.json")
            output_dir = gr.Textbox(label="Output folder", placeholder="/path/to/output")

            gr.Markdown("### 2. Options")
            add_comments = gr.Checkbox(label="Add comments to generated JS files", value=True)
            open_folder = gr.Checkbox(label="Auto-open results folder", value=True)

            start_btn = gr.Button("START", variant="primary")

        # Right Panel: Progress & Log
        with gr.Column(scale=1):
            gr.Markdown("### 3. Progress")
            status_msg = gr.Textbox(label="Status", interactive=False)
            log_output = gr.Textbox(label="Log", lines=16, max_lines=32, interactive=False)

    demo.load(
        fn=load_initial_state,
        inputs=None,
        outputs=[input_path, output_dir, add_comments, open_folder, log_output],
    )

    input_path.blur(
        fn=handle_input_change,
        inputs=[input_path, output_dir],
        outputs=[output_dir],
    )

    start_btn.click(
        fn=run_extraction_handler,
        inputs=[input_path, output_dir, add_comments, open_folder],
        outputs=[status_msg, log_output],
    )

if __name__ == "__main__":
    setup_logging()
    demo.launch()
