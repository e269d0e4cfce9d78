import io
import time

from jsonseq import Encoder, RecordHandler, StreamingRecordParser


events = [
    {"id": 1, "type": "start", "title": "Ingest"},
    {"id": 2, "type": "progress", "done": 0.5},
    12341234,
    True,
    {"id": 3, "type": "end"},
]

stream = io.BytesIO()
encoder = Encoder(stream)
for event in events:
    encoder.encode(event)

# A producer that died mid-number
data = stream.getvalue() + b"\x1e42"


class EventHandler(RecordHandler):
    def on_record(self, value, raw):
        if isinstance(value, dict):
            print(f"[{value.get('type')}] {value}")
        else:
            print(f"[scalar] {value!r}")

    def on_invalid_record(self, data, reason, error=None):
        print(f"[{reason.value}] {data!r}")

    def on_end(self):
        print("-- end of stream --")


parser = StreamingRecordParser(EventHandler())

for i in range(0, len(data), 4):
    chunk = data[i:i+4]
    parser.parse_incremental(chunk)
    time.sleep(0.01)

parser.close()
