"""CSV generator for workout routines.

Output format (fixed column order):
```
id,name,weight,sets,reps,notes,supersetParentId,altParentId,day,dayOrder
w1,Bench Press,135,4,8,"Keep elbows tucked, slow negative",,,1,0
w2,Incline DB Press,50,3,10,,w1,,1,1
```
"""

from ..models.workout import CSV_HEADERS, WorkoutRecord
from ..utils.csv_codec import encode_rows


def workouts_to_csv(workouts: list[WorkoutRecord]) -> str:
    """Serialize workouts to CSV text, one row per workout."""
    return encode_rows(
        CSV_HEADERS,
        ([w.csv_value(h) for h in CSV_HEADERS] for w in workouts),
    )
