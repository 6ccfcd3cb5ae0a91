from flask import Flask, request, jsonify
from flask_cors import CORS
from earnings import EarningsProcessor, TierPolicy
import os
import logging

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

app = Flask(__name__)

# Enable CORS for all routes (dashboards call the API from the browser)
CORS(app)

# Initialize the earnings processor
processor = EarningsProcessor(TierPolicy.from_env())

OPERATIONS = {
    "breakdown": processor.breakdown,
    "team_earnings": processor.team_earnings,
    "manager_commission": processor.manager_commission,
    "team_revenue": processor.team_revenue,
    "pay_type": processor.pay_type,
    "pay_summary": processor.pay_summary,
}


@app.route("/api", methods=["GET"])
def api_info():
    """API information endpoint"""
    return jsonify({
        "status": "ok",
        "message": "Solar Earnings Engine API",
        "version": "1.0",
        "endpoints": {
            **{name: f"/{name} [POST]" for name in OPERATIONS},
            "health": "/health [GET]"
        }
    }), 200


@app.route("/health", methods=["GET"])
def health():
    """Health check for monitoring"""
    return jsonify({"status": "healthy"}), 200


def run_operation(name):
    """
    Run one engine operation on the JSON request body
    """
    try:
        # Get input data
        input_data = request.get_json(force=True, silent=True)

        if not input_data:
            return jsonify({
                "error": "No input data provided",
                "status": "failed"
            }), 400

        # Log request
        project_count = len(input_data.get("projects") or []) if isinstance(input_data, dict) else 0
        logger.info(f"Running {name} over {project_count} projects")

        result = OPERATIONS[name](input_data)

        logger.info(f"{name} completed successfully")

        return jsonify(result), 200

    except (ValueError, KeyError, TypeError) as e:
        # Request validation errors
        logger.error(f"Validation error: {str(e)}")
        return jsonify({
            "error": str(e),
            "status": "validation_failed"
        }), 400

    except Exception as e:
        # Unexpected errors
        logger.error(f"Processing error: {str(e)}", exc_info=True)
        return jsonify({
            "error": "An unexpected error occurred during processing",
            "status": "failed"
        }), 500


@app.route("/breakdown", methods=["POST"])
def breakdown():
    """Commission breakdown for a single project"""
    return run_operation("breakdown")


@app.route("/team_earnings", methods=["POST"])
def team_earnings():
    """Team earnings for a year, optionally scoped to an office"""
    return run_operation("team_earnings")


@app.route("/manager_commission", methods=["POST"])
def manager_commission():
    """Manager override commission for a year"""
    return run_operation("manager_commission")


@app.route("/team_revenue", methods=["POST"])
def team_revenue():
    """Team revenue for a year, optionally scoped to an office"""
    return run_operation("team_revenue")


@app.route("/pay_type", methods=["POST"])
def pay_type():
    """Pay tier inferred from a rep's paid history"""
    return run_operation("pay_type")


@app.route("/pay_summary", methods=["POST"])
def pay_summary():
    """Year-to-date pay summary for a rep"""
    return run_operation("pay_summary")


if __name__ == "__main__":
    port = int(os.environ.get("PORT", 8080))
    app.run(host="0.0.0.0", port=port, debug=False)
