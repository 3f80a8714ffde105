# coursebook

Tools for building structured training courses with mdBook. A book's chapters
are grouped into courses, sessions, segments and slides from frontmatter
annotations. That structure is then used to add timing notes, generate outlines
and schedules, and extract exercise files.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Describing the course structure

Each chapter may start with YAML frontmatter:

```markdown
---
course: Fundamentals
session: Morning
minutes: 10
target_minutes: 180
---

# Welcome
```

- `course` starts a new course and resets the session. The value `none` leaves
  course material. Whenever a course is set, `session` must be set too,
  otherwise `CourseStructureError` is raised.
- `session` starts a new session in the current course. Sessions with the same
  name in a course are merged.
- `minutes` is how long the slide takes to teach. It must be a non-negative
  integer.
- `target_minutes` adds to the planned length of the session.

Malformed frontmatter raises `FrontmatterError`.

Each top-level chapter in a session becomes a segment. The chapter is the
segment's first slide, and each of its sub-chapters is a further slide. Deeper
sub-chapters are part of the slide above them, and their minutes are added to
that slide. They may not set `course` or `session`.

A session's length is the sum of its segments. Ten minutes of break is added
between each pair of segments that take any time. Durations are shown in words,
and anything over five minutes is rounded up to the next multiple of five
(`duration(61)` gives `"1 hour and 5 minutes"`).

## The preprocessor: `mdbook-course`

Register it in `book.toml`:

```toml
[preprocessor.course]
command = "mdbook-course"
```

`mdbook-course supports <renderer>` exits with status 0 for every renderer.
Without a subcommand it does the following:

1. It reads the `[context, book]` JSON pair from standard input.
2. It strips the frontmatter from each chapter.
3. It writes the processed book as JSON to standard output.

While processing, it makes two changes to chapter content:

- **Timing notes.** On the first chapter of each slide that has minutes, it
  adds "This slide should take about N minutes." after each `<details>` tag.
  The text reads "This slide and its sub-slides …" when the slide spans
  several chapters.
- **Directives.** It expands the first `{{%...}}` directive in each chapter:

| Directive                  | Replaced by                                   |
|----------------------------|-----------------------------------------------|
| `{{%session outline}}`     | an outline of the chapter's session           |
| `{{%segment outline}}`     | an outline of the chapter's segment           |
| `{{%course outline}}`      | the schedule of the chapter's course          |
| `{{%course outline NAME}}` | the schedule of the course called NAME        |

If no course is called NAME, the directive is left as it is. Any other
directive, including one that refers to a course, session or segment the
chapter does not belong to, is replaced by its own text. Links in outlines are
relative to the chapter's source path.

When the input cannot be processed, the error is printed to standard error and
the command exits with status 1.

## Reports

Run these from the book's root directory. They read `src/SUMMARY.md` and the
chapter files it lists.

`course-schedule` (or `course-schedule sessions`) prints a Markdown summary of
every session and its segments. Each session's time is compared with its
target, with a tolerance of 15 minutes.

`course-schedule pr` prints a summary suited to a pull request description. It
compares each course's time with its target within 15 minutes, and each
session's time with its target within 5 minutes.

Both summaries stop at the first course with no planned time.

`course-content` prints the full text of every slide, under
`# COURSE:`, `# SESSION:`, `# SEGMENT:` and `# SLIDE:` headings.

The same output is available from Python as `schedule.session_summary`,
`schedule.pr_summary`, `schedule.timediff` and `content.course_content`.

## Extracting exercises: `mdbook-exerciser`

`mdbook-exerciser` is an mdBook renderer. Mark a code block with a comment that
names the file it belongs in:

````markdown
<!-- File src/main.rs -->

```rust
fn main() {}
```
````

Then configure the renderer:

```toml
[output.exerciser]
output-directory = "exercises"
```

The renderer reads the render context from standard input. It removes and
recreates the output directory, then writes each marked code block to the named
file, in a subdirectory named after the chapter's file stem. Code blocks without
such a comment are ignored, and so are comments not followed by a code block.

From Python:

- `exerciser.process(output_directory, markdown_text)` handles a single text.
- `exerciser.process_all(book, output_directory)` handles a whole `Book`.

## Using the library

```python
from coursebook.course import Book, Courses

courses, book = Courses.extract_structure(Book.from_json(book_json))
for course in courses:
    print(course.name, course.minutes(), course.target_minutes())
    print(course.schedule("index.md"))
```

- `Courses.find_course(name)` looks up a course by name.
- `Courses.find_slide(chapter)` returns the `(course, session, segment, slide)`
  a chapter belongs to, or `None`.
- `Session.outline(path)` and `Segment.outline(path)` render the same outlines
  the directives use.

The package also contains two small exercise programs:

- `collatz.collatz_length(n)` gives the length of the Collatz sequence starting
  at `n`. For example, `collatz_length(11)` is 15.
- `expression.parse(text)` parses sums and differences of unsigned numbers and
  lower-case identifiers into `Number`, `Var` and `Operation` trees. Operations
  group to the right. Errors are raised as `ParserError` subclasses:
  `UnexpectedEOF`, `UnexpectedToken` and `InvalidNumber` for numbers over
  2³²−1. Bad characters are also reported as `ParserError`, wrapping the
  `TokenizerError` raised by `tokenize`.

## Not included

`course-schedule segments` is accepted but produces no summary. It prints
"segment summary is not available" and exits with status 2.