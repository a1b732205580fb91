"""
FNOL Claims Intake Agent
Main Flask Application

Run with: python app.py
Open browser at: http://localhost:5000
"""

import os
import uuid
import warnings
from datetime import datetime
from flask import Flask, render_template, request, jsonify
from werkzeug.utils import secure_filename

from config import Config
from fnol.extractor import DocumentExtractor
from fnol.logger import setup_logger, quiet_library_loggers
from fnol.parser import ExtractedFields
from fnol.processor import ClaimProcessor, format_field_name
from generate_samples import main as generate_samples


# ── Suppress noisy library logs ──────────────────────────────
warnings.filterwarnings("ignore", message=".*CropBox.*")
warnings.filterwarnings("ignore", message=".*MediaBox.*")
quiet_library_loggers()

log_server    = setup_logger("fnol_agent.server")
log_pipeline  = setup_logger("fnol_agent.pipeline")
log_parser    = setup_logger("fnol_agent.parser")
log_validate  = setup_logger("fnol_agent.validator")
log_router    = setup_logger("fnol_agent.router")


# ── Flask App ─────────────────────────────────────────────────

app = Flask(__name__)
app.config.from_object(Config)

os.makedirs(app.config['UPLOAD_FOLDER'], exist_ok=True)

doc_extractor = DocumentExtractor()
claim_processor = ClaimProcessor()


def allowed_file(filename):
    return '.' in filename and \
           filename.rsplit('.', 1)[1].lower() in app.config['ALLOWED_EXTENSIONS']


# ── Routes ────────────────────────────────────────────────────

@app.route('/')
def index():
    labels = {key: format_field_name(key) for key in ExtractedFields().to_dict()}
    return render_template('index.html', field_labels=labels,
                           threshold=Config.FAST_TRACK_THRESHOLD,
                           currency=Config.CURRENCY_SYMBOL)


@app.route('/favicon.ico')
def favicon():
    return '', 204


@app.route('/api/process-text', methods=['POST'])
def process_text():
    payload = request.get_json(silent=True) or {}
    text = payload.get('text')
    if not isinstance(text, str) or text.strip() == '':
        return jsonify({'error': 'No claim text provided'}), 400

    log_server.info(f"[Paste] Received {len(text)} characters")
    return jsonify(_run_pipeline(text, 'pasted text')), 200


@app.route('/api/process-claim', methods=['POST'])
def process_claim():
    if 'file' not in request.files:
        return jsonify({'error': 'No file uploaded'}), 400

    file = request.files['file']
    if file.filename == '':
        return jsonify({'error': 'No file selected'}), 400

    if not allowed_file(file.filename):
        log_server.warning(f"[Upload] Rejected: {file.filename} (invalid file type)")
        return jsonify({'error': 'Invalid file type. Only PDF and TXT files are allowed.'}), 400

    ext = file.filename.rsplit('.', 1)[1].lower()
    filename = secure_filename(file.filename)
    if not filename.lower().endswith(f'.{ext}'):
        # secure_filename drops non-ASCII names down to the bare extension
        filename = f"upload.{ext}"
    filepath = os.path.join(app.config['UPLOAD_FOLDER'], f"{uuid.uuid4().hex}_{filename}")
    try:
        file.save(filepath)
        log_server.info(f"[Upload] Received: '{file.filename}' ({ext.upper()})")
        result = _run_file_pipeline(filepath, file.filename)
        return jsonify(result), 200

    except (OSError, ValueError, RuntimeError) as e:
        log_pipeline.error(f"[Pipeline] Failed: {str(e)}")
        return jsonify({'error': f'Processing failed: {str(e)}'}), 500

    finally:
        try:
            os.remove(filepath)
        except OSError:
            pass


@app.route('/api/process-sample/<filename>', methods=['POST'])
def process_sample(filename):
    filepath = os.path.join(app.config['SAMPLE_FOLDER'], secure_filename(filename))

    if not os.path.exists(filepath):
        log_server.error(f"[Sample] Not found: {filename}")
        return jsonify({'error': 'Sample file not found'}), 404

    try:
        log_server.info(f"[Sample] Processing: '{filename}'")
        return jsonify(_run_file_pipeline(filepath, filename)), 200
    except (OSError, ValueError, RuntimeError) as e:
        log_pipeline.error(f"[Pipeline] Failed: {str(e)}")
        return jsonify({'error': f'Processing failed: {str(e)}'}), 500


@app.route('/api/sample-claims', methods=['GET'])
def get_sample_claims():
    sample_dir = app.config['SAMPLE_FOLDER']
    if not os.path.exists(sample_dir):
        return jsonify([]), 200
    files = [f for f in os.listdir(sample_dir) if f.endswith(('.pdf', '.txt'))]
    return jsonify(sorted(files)), 200


@app.route('/api/health', methods=['GET'])
def health_check():
    return jsonify({
        'status': 'healthy',
        'timestamp': datetime.now().isoformat(),
        'supported_formats': ['PDF', 'TXT'],
        'fast_track_threshold': Config.FAST_TRACK_THRESHOLD,
        'currency': Config.CURRENCY_SYMBOL,
    }), 200


# ── Pipeline ──────────────────────────────────────────────────

def _run_file_pipeline(filepath: str, display_name: str) -> dict:
    """Read a document from disk, then process its text."""
    raw_text = doc_extractor.extract(filepath)
    if not raw_text or raw_text.strip() == '':
        raise ValueError('Could not extract text. File may be empty or corrupted.')
    return _run_pipeline(raw_text, display_name)


def _run_pipeline(raw_text: str, source: str) -> dict:
    """Run extraction, completeness check and routing on one document."""

    claim_id = f"CLM-{uuid.uuid4().hex[:8].upper()}"
    log_pipeline.info(f"[{claim_id}] Starting pipeline for: '{source}' ({len(raw_text)} characters)")

    result = claim_processor.process(raw_text)

    found = sum(1 for v in result.display_fields.values() if v is not None)
    log_parser.info(f"[{claim_id}] Extracted {found} of {len(result.display_fields)} fields")

    if result.missing_fields:
        log_validate.warning(f"[{claim_id}] Missing {len(result.missing_fields)} field(s): "
                             f"{', '.join(result.missing_fields)}")
    else:
        log_validate.info(f"[{claim_id}] All mandatory fields present")

    rule = claim_processor.router.matched_rule(result.fields, result.missing_fields) or 'default'
    log_router.info(f"[{claim_id}] Route: {result.decision.route} | Rule: {rule}")
    log_router.info(f"[{claim_id}] Reason: {result.decision.reasoning}")

    output = {
        'claimId': claim_id,
        'source': source,
        'processedAt': datetime.now().isoformat(),
        **result.to_dict(),
        'rawTextPreview': raw_text[:500] + ('...' if len(raw_text) > 500 else ''),
    }

    log_pipeline.info(f"[{claim_id}] Pipeline complete -> {result.decision.route} | "
                      f"Missing: {len(result.missing_fields)}")
    return output


def ensure_samples():
    """Generate the sample documents if fewer than five are present."""
    sample_dir = app.config['SAMPLE_FOLDER']
    sample_files = [f for f in os.listdir(sample_dir) if f.endswith('.txt')] if os.path.exists(sample_dir) else []
    if len(sample_files) >= 5:
        log_server.info(f"[Server] {len(sample_files)} sample documents found")
        return
    log_server.info("[Server] Generating sample FNOL documents...")
    try:
        generate_samples(sample_dir)
        log_server.info("[Server] 5 sample FNOL documents generated successfully")
    except OSError as e:
        log_server.warning(f"[Server] Could not generate samples: {e}")


# ── Start Server ──────────────────────────────────────────────

if __name__ == '__main__':
    # Suppress Flask's default startup banner ("Serving Flask app", "Debug mode: off")
    import flask.cli
    flask.cli.show_server_banner = lambda *args, **kwargs: None

    log_server.info("[Server] ════════════════════════════════════════════════════")
    log_server.info("[Server] FNOL CLAIMS INTAKE AGENT")
    log_server.info("[Server] ════════════════════════════════════════════════════")
    log_server.info("[Server] Formats: pasted text, PDF, TXT")
    log_server.info(f"[Server] Fast-track threshold: {Config.CURRENCY_SYMBOL}{Config.FAST_TRACK_THRESHOLD:,}")
    ensure_samples()
    log_server.info(f"[Server] Running on http://localhost:{Config.PORT}")
    log_server.info("[Server] Waiting for claims...")
    log_server.info("[Server] ════════════════════════════════════════════════════")

    app.run(debug=False, host=Config.HOST, port=Config.PORT)
