from flask import Blueprint, jsonify, request, current_app
from sqlalchemy.exc import SQLAlchemyError
from leaderboard import db
from leaderboard.models import Score


scores = Blueprint('scores', __name__)

NAME_MAX_LENGTH = 64


def _parse_limit(raw):
    """Return (limit, error). Missing limit falls back to the configured default."""
    if raw is None or raw == '':
        return current_app.config['SCORES_DEFAULT_LIMIT'], None
    try:
        limit = int(raw)
    except (TypeError, ValueError):
        return None, 'limit must be an integer'
    if limit < 1:
        return None, 'limit must be positive'
    return min(limit, current_app.config['SCORES_MAX_LIMIT']), None


def _parse_score(raw):
    # bool is an int subclass; a true/false score is a client bug
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float) and raw.is_integer():
        return int(raw)
    return None


@scores.route('', methods=['POST'])
def submit_score():
    data = request.get_json(silent=True)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        return jsonify({'success': False, 'error': 'body must be a JSON object'}), 400
    name = data.get('name', 'Anonymous')
    raw_score = data.get('score', 0)

    if name is None:
        name = 'Anonymous'
    name = str(name)[:NAME_MAX_LENGTH]
    value = _parse_score(raw_score)
    if value is None:
        return jsonify({'success': False, 'error': 'score must be an integer'}), 400

    entry = Score(name=name, score=value)
    try:
        db.session.add(entry)
        db.session.commit()
    except SQLAlchemyError as exc:
        db.session.rollback()
        current_app.logger.error(f"[scores] failed to save score name={name!r}: {exc}")
        return jsonify({'success': False, 'error': 'Failed to save score'}), 500

    current_app.logger.info(f"[scores] saved id={entry.id} name={name!r} score={entry.score}")
    return jsonify({'success': True, 'id': entry.id})


@scores.route('', methods=['GET'])
def top_scores():
    limit, error = _parse_limit(request.args.get('limit'))
    if error:
        return jsonify({'success': False, 'error': error}), 400
    try:
        top = Score.top(limit)
    except SQLAlchemyError as exc:
        current_app.logger.error(f"[scores] failed to fetch scores: {exc}")
        return jsonify({'success': False, 'error': 'Failed to fetch scores'}), 500
    return jsonify({'success': True, 'scores': [s.to_dict() for s in top]})
