"""
Ledger Summary Dashboard

A Flask-based tool for uploading a ledger spreadsheet and reviewing its
deficit / service / advances totals and the per-name breakdown.

This tool is read-only: uploads are analyzed in memory and never written
to disk.
"""

import csv
import io
import json
import logging
import os
from datetime import datetime
from typing import Any, Dict, List

from flask import Flask, jsonify, render_template, request, send_file
from werkzeug.utils import secure_filename

from ledger_engine import AnalysisResult, LedgerAnalyzer, LedgerDataError
from ledger_engine.config.analysis_config import ANALYSIS_CONFIG, DASHBOARD_CONFIG
from ledger_engine.patterns.ledger_patterns import CATEGORY_PATTERNS


app = Flask(__name__)
app.config['MAX_CONTENT_LENGTH'] = DASHBOARD_CONFIG['max_content_length']

analyzer = LedgerAnalyzer()

NAME_EXPORT_FIELDS = ['name', 'is_canonical', 'debit', 'credit', 'net', 'count']


def allowed_file(filename: str) -> bool:
    """Check if file extension is allowed."""
    return (
        '.' in filename
        and filename.rsplit('.', 1)[1].lower() in DASHBOARD_CONFIG['allowed_extensions']
    )


def format_amount(value: float) -> str:
    """Format an amount with thousands separators and fixed decimals."""
    places = ANALYSIS_CONFIG['display']['decimal_places']
    return f"{value:,.{places}f}"


def format_display(result: AnalysisResult) -> Dict[str, Any]:
    """
    Build display strings for every figure in the result.

    Args:
        result: Analysis result

    Returns:
        Dictionary mirroring the result layout with formatted numbers
    """
    categories = {}
    for key, totals in result.categories.to_dict().items():
        entry = {field: format_amount(amount) for field, amount in totals.items()}
        entry['label'] = CATEGORY_PATTERNS.get(key, {}).get('description', key)
        categories[key] = entry

    names = []
    for record, is_canonical in result.names.ordered_records():
        names.append({
            'name': record.name,
            'label': 'canonical' if is_canonical else 'variant',
            'debit': format_amount(record.debit),
            'credit': format_amount(record.credit),
            'net': format_amount(record.net),
            'count': record.count,
        })

    return {
        'categories': categories,
        'summary': {
            'advances': format_amount(result.advances.net),
            'service': format_amount(result.service.net),
            'deficit': format_amount(result.deficit.net),
            'grand_total': format_amount(result.grand_total),
        },
        'names': names,
        'show_names': result.names.has_names,
    }


def _names_from_request() -> List[Dict[str, Any]]:
    data = request.get_json(silent=True)
    if not data or 'names' not in data:
        raise LedgerDataError('No names provided')
    names = data['names']
    if not isinstance(names, list):
        raise LedgerDataError('Names must be an array')
    return names


@app.route('/')
def index():
    """Main dashboard page with file upload form."""
    return render_template('dashboard.html')


@app.route('/upload', methods=['POST'])
def upload_file():
    """
    Handle a single ledger upload (xlsx or csv) and analyze it.

    Returns JSON with the raw result and formatted display values.
    """
    if 'file' not in request.files:
        return jsonify({'error': 'No file provided'}), 400

    file = request.files['file']
    if not file or not file.filename:
        return jsonify({'error': 'No file selected'}), 400

    if not allowed_file(file.filename):
        return jsonify({
            'error': 'Invalid file type. Only xlsx and csv files are allowed.'
        }), 400

    filename = secure_filename(file.filename)
    # secure_filename drops non-ASCII names; keep the extension for the loader
    if not allowed_file(filename):
        filename = f"upload.{file.filename.rsplit('.', 1)[1].lower()}"

    try:
        result = analyzer.analyze_file(io.BytesIO(file.read()), filename=filename)
    except LedgerDataError as e:
        app.logger.warning(f"Upload rejected for {filename}: {e}")
        return jsonify({'error': str(e)}), 400
    except Exception as e:
        app.logger.error(f"Failed to analyze {filename}: {str(e)}", exc_info=True)
        return jsonify({'error': f'Failed to read file: {str(e)}'}), 500

    app.logger.info(
        f"Analyzed {filename}: {len(result.transactions)} transactions, "
        f"{len(result.names.name_records)} names"
    )

    return jsonify({
        'success': True,
        'filename': filename,
        'result': result.to_dict(),
        'display': format_display(result),
    })


@app.route('/export/csv', methods=['POST'])
def export_csv():
    """
    Export the per-name breakdown to CSV format.

    Expects JSON body with 'names' field as produced by /upload.
    """
    try:
        names = _names_from_request()
    except LedgerDataError as e:
        app.logger.warning(f"CSV export: {e}")
        return jsonify({'error': str(e)}), 400

    try:
        output = io.StringIO()
        writer = csv.DictWriter(
            output, fieldnames=NAME_EXPORT_FIELDS, restval='', extrasaction='ignore'
        )
        writer.writeheader()
        for row in names:
            writer.writerow(row)

        # BOM so spreadsheet tools pick up the Arabic names correctly
        csv_data = output.getvalue().encode('utf-8-sig')

        timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
        filename = f'ledger_names_{timestamp}.csv'

        app.logger.info(f"CSV export: Successfully exported {len(names)} names")

        return send_file(
            io.BytesIO(csv_data),
            mimetype='text/csv',
            as_attachment=True,
            download_name=filename
        )
    except Exception as e:
        app.logger.error(f"CSV export error: {str(e)}", exc_info=True)
        return jsonify({'error': f'Failed to export CSV: {str(e)}'}), 500


@app.route('/export/json', methods=['POST'])
def export_json():
    """
    Export the per-name breakdown to JSON format.

    Expects JSON body with 'names' field as produced by /upload.
    """
    try:
        names = _names_from_request()
    except LedgerDataError as e:
        app.logger.warning(f"JSON export: {e}")
        return jsonify({'error': str(e)}), 400

    try:
        timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
        filename = f'ledger_names_{timestamp}.json'

        json_data = json.dumps(names, indent=2, ensure_ascii=False).encode('utf-8')

        app.logger.info(f"JSON export: Successfully exported {len(names)} names")

        return send_file(
            io.BytesIO(json_data),
            mimetype='application/json',
            as_attachment=True,
            download_name=filename
        )
    except Exception as e:
        app.logger.error(f"JSON export error: {str(e)}", exc_info=True)
        return jsonify({'error': f'Failed to export JSON: {str(e)}'}), 500


if __name__ == '__main__':
    logging.basicConfig(
        level=os.environ.get('LEDGER_LOG_LEVEL', 'INFO').upper(),
        format="%(asctime)s - %(levelname)s - %(message)s"
    )

    port = DASHBOARD_CONFIG['port']
    print("=" * 80)
    print("Ledger Summary Dashboard")
    print("=" * 80)
    print(f"\nStarting dashboard on http://localhost:{port}")
    print("\nPress Ctrl+C to stop the server.")
    print("=" * 80)

    # Set FLASK_DEBUG=1 only in development environments
    debug_mode = os.environ.get('FLASK_DEBUG', '0') == '1'
    if debug_mode:
        print("\n⚠️  WARNING: Running in DEBUG mode. Not suitable for production!")
        print("=" * 80)

    app.run(debug=debug_mode, port=port, host='0.0.0.0')
