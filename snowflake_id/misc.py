import json
from datetime import datetime
from .models import Snowflake


class JSONEncoder(json.JSONEncoder):
    """renders a `Snowflake` as its base-10 string, json readers seldom keep 64-bit integers intact"""

    def default(self, o):
        if isinstance(o, Snowflake):
            return str(o)
        elif isinstance(o, datetime):
            return o.strftime('%Y-%m-%d %H:%M:%S.%f')
        return super().default(o)


def dumps(obj, **kwargs) -> str:
    return json.dumps(obj, cls=JSONEncoder, **kwargs)


def describe(sf: Snowflake, snowflake_id=None) -> dict:
    return {
        'id': sf if snowflake_id is None else str(snowflake_id),
        'timestamp': sf.timestamp,
        'worker_id': sf.worker_id,
        'process_id': sf.process_id,
        'sequence_id': sf.sequence_id,
    }
