from datetime import datetime, timezone
from leaderboard import db


def _utcnow():
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Score(db.Model):
    __tablename__ = 'scores'
    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    name = db.Column(db.String(64), nullable=False, default='Anonymous')
    score = db.Column(db.Integer, nullable=False, default=0, index=True)
    created_at = db.Column(db.DateTime, nullable=False, default=_utcnow)

    @classmethod
    def top(cls, limit):
        """Highest scores first; equal scores keep submission order."""
        return (
            cls.query
            .order_by(cls.score.desc(), cls.created_at.asc(), cls.id.asc())
            .limit(limit)
            .all()
        )

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'score': self.score,
            'created_at': self.created_at.strftime('%Y-%m-%d %H:%M:%S') if self.created_at else None,
        }
