# netlab

A handful of small networking and command-line programs in one package:

- an HTTP/1.1 request parser and response writer (`netlab.http_request`,
  `netlab.http_response`);
- a single-threaded HTTP server that serves static pages and a JSON order
  list (`netlab.server`, `netlab.router`, `netlab.handlers`);
- a TCP echo server and client (`netlab.tcp_echo`);
- a line search tool in the spirit of `grep` (`netlab.minigrep`);
- a teacher and course web service with a JSON API, stored in SQLite
  (`netlab.service_app`, `netlab.service_db`, `netlab.service_models`,
  `netlab.service_errors`);
- a terminal flapping game (`netlab.game`).

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Line search

```
netlab-grep QUERY FILE
```

Prints every line of `FILE` that contains `QUERY`. Set the environment
variable `IGNORE_CASE` (to any value) to match without regard to case.
A missing argument is reported on standard error with exit status 1; a
file that cannot be read gives exit status 2.

From Python:

```python
from netlab.minigrep import Config, run, search, search_case_insensitive

search("duct", "Rust:\nsafe, fast, productive.\nPick three.")
# ['safe, fast, productive.']
search_case_insensitive("ruSt", "Rust:\nsafe, fast, productive.\nPick three.")
# ['Rust:']

run(Config(query="three", file_path="poem.txt"))   # prints matching lines
```

`Config.build(args)` takes an argument list with the program name first and
raises `ValueError` when the query or the file path is missing.

## TCP echo

```
netlab-echo-server [HOST:PORT]
netlab-echo-client [MESSAGE] [HOST:PORT]
```

Both default to `127.0.0.1:3000`. The server reads up to 1024 bytes from
each connection and sends them back as a full 1024-byte buffer padded with
zero bytes. The client sends `MESSAGE` (default `Hello`) and prints the
reply with the padding removed.

From Python: `serve(address, limit)` runs the server (stopping after
`limit` connections if given), `send_message(address, message)` returns the
reply, and `handle_connection(conn)` echoes a single accepted socket.

## HTTP server

```
netlab-http-server [HOST:PORT]
```

Listens on `localhost:3000` by default, answering one request per
connection (only the first 1024 bytes are read).

- `GET /` and `GET /health` return `200.html`.
- `GET /<file>` returns that file from the public directory, with a
  `text/css`, `text/javascript` or `text/html` content type by extension;
  files that cannot be read get `404.html` with status 404.
- `GET /api/shopping/orders` returns the orders in `orders.json` as JSON
  (each with `id`, `date` and `status`); other `/api` paths get the 404 page.
- `POST` requests are read but get no answer; other methods get the 404 page.

The public directory is taken from `PUBLIC_PATH` (default `./public`) and
the data directory from `DATA_PATH` (default `./data`). The public
directory must hold `200.html` and `404.html`; a request whose answer has
no page to send fails and is reported on standard error.

Parsing and building messages directly:

```python
from netlab.http_request import HttpMethod, HttpRequest
from netlab.http_response import HttpResponse

request = HttpRequest.parse("GET /index.html HTTP/1.1\r\nHost: localhost\r\n\r\n")
assert request.method is HttpMethod.GET
assert request.resource == "/index.html"
assert request.headers == {"Host": "localhost"}

response = HttpResponse.create("404", None, "missing")
print(response.to_text())
# HTTP/1.1 404 Not Found
# Content-Type:application/json
# Content-Length: 7
#
# missing
```

`HttpRequest.parse` recognises only `HTTP/1.1` request lines; unknown
methods and versions become `UNINITIALIZED`. `HttpResponse.send(stream)`
writes the response to a socket or binary stream.

## Teacher and course service

```
netlab-teacher-service --database-url sqlite:service.db
```

Options: `--database-url` (default `$DATABASE_URL`; a file path or a
`sqlite:` URL such as `sqlite::memory:`), `--host` (default `127.0.0.1`),
`--port` (default `3000`), and `--health-only`, which serves nothing but a
fixed health message. The tables are created when missing.

| Method | Path                                | Action                          |
|--------|-------------------------------------|---------------------------------|
| GET    | `/health`                           | `"I'm OK. N times"`, N counting visits |
| POST   | `/teachers/`                        | create a teacher                |
| GET    | `/teachers/`                        | list teachers (404 if none)     |
| GET    | `/teachers/<teacher_id>`            | teacher details                 |
| PUT    | `/teachers/<teacher_id>`            | replace a teacher's fields      |
| DELETE | `/teachers/<teacher_id>`            | delete a teacher                |
| POST   | `/courses/`                         | create a course                 |
| GET    | `/courses/<teacher_id>`             | a teacher's courses             |
| GET    | `/courses/<teacher_id>/<course_id>` | course details                  |
| PUT    | `/courses/<teacher_id>/<course_id>` | update a course                 |
| DELETE | `/courses/<teacher_id>/<course_id>` | delete a course                 |

Creating a teacher needs `name`, `picture_url` and `profile`; updating one
sets all three, so fields left out become null. Creating a course needs
`teacher_id` and `name`; updating one changes only the fields given.
Deletes answer with `"Deleted N record"`.

Errors come back as `{"error_message": ...}` with status 404 for missing
records, 400 for invalid input and 500 for database failures. Requests
with an `Origin` starting with `http://localhost` get CORS headers.

In code:

```python
from netlab.service_app import create_app
from netlab.service_db import AppState, connect, init_schema

db = connect("sqlite::memory:")
init_schema(db)
app = create_app(AppState(health_check_response="I'm OK.", db=db))
client = app.test_client()
client.post("/teachers/", json={"name": "Ann", "picture_url": "pic", "profile": "Math"})
```

The storage functions in `netlab.service_db` (`post_new_teacher_db`,
`get_course_details_db` and the rest) can also be used on their own.

### What the service does not do

It keeps its data in SQLite only; there is no support for other database
servers. It serves JSON only: there is no HTML front end or registration
page for teachers.

## Game

```
netlab-game [--seed N]
```

Runs in the terminal (it needs the `curses` module). Press `P` on the menu
to play, `Space` to flap over the gaps in the walls, and `Q` to quit. The
score rises with each wall passed, and the gaps narrow as it does. `--seed`
fixes the wall positions.

The game logic (`State`, `Player`, `Obstacle`) draws onto a `Console`
character grid and can be driven without a terminal through
`State.tick(console, key, frame_time_ms)`.