from flask import Flask, jsonify, request
from keysmith.errors import KeySmithError, ValidationError
from keysmith.generator import CharacterClass, EmptyPoolPolicy, SamplingMode, generate
from keysmith.validation import build_request

app = Flask(__name__)


def _flag(data, camel, snake=None):
    value = data.get(camel, data.get(snake, False) if snake else False)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ValidationError(camel, f"{camel} must be true or false.")
    return value


@app.errorhandler(KeySmithError)
def handle_keysmith_error(e):
    body = {"error": str(e)}
    if isinstance(e, ValidationError):
        body["field"] = e.field
    return jsonify(body), 400


@app.route('/')
def home():
    return jsonify({
        "message": "KeySmith API is running"
    })


@app.route('/classes')
def classes_route():
    return jsonify({c.name.lower(): c.alphabet for c in CharacterClass})


@app.route('/generate', methods=['POST'])
def generate_route():
    data = request.get_json(silent=True)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValidationError("body", "Request body must be a JSON object.")
    req = build_request(
        data.get('length'),
        has_lower_case=_flag(data, 'hasLowerCase', 'has_lower_case'),
        has_upper_case=_flag(data, 'hasUpperCase', 'has_upper_case'),
        has_digit=_flag(data, 'hasDigit', 'has_digit'),
        has_symbol=_flag(data, 'hasSymbol', 'has_symbol'),
    )
    password = generate(
        req,
        sampling=SamplingMode.LEGACY if _flag(data, 'legacy') else SamplingMode.UNIFORM,
        empty_pool=EmptyPoolPolicy.RAISE if _flag(data, 'strict') else EmptyPoolPolicy.EMPTY,
    )
    return jsonify({'password': password, 'length': req.length})


if __name__ == "__main__":
    app.run(debug=True)
