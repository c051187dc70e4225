# minitalk

minitalk passes a text message from one process to another using only two
POSIX signals. SIGUSR1 stands for a 1 bit and SIGUSR2 for a 0 bit. Each byte
of the UTF-8 encoded message is sent as eight bits, with the highest bit first.
A NUL byte ends the message.

The receiver acknowledges every bit with SIGUSR1. The sender waits for that
acknowledgement before it sends the next bit. When the terminating NUL arrives,
the receiver also sends SIGUSR2, and the sender then treats the message as
delivered.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

The server waits for signals with `signal.sigwaitinfo`. It therefore runs only
where Python provides that function, such as Linux.

## Usage

Start the server. It prints `pid: <number>` and then waits for messages:

```
minitalk-server
```

From another terminal, send a message to that pid:

```
minitalk-client <pid> "Hello there"
```

Each message appears on the server's standard output after the prompt
`Client say : `. When the server confirms the message, the client prints
`Message received !`. Pass `--quiet` before the pid to leave that line out:

```
minitalk-client --quiet <pid> "Hello there"
```

The client exits with status 1 and a message in these cases:

- It is not given exactly two arguments after the optional `--quiet`. It
  prints the usage line.
- The pid does not read as a non-zero number. It prints
  `<pid> is an invalid pid`.
- The target process cannot be signalled. It prints
  `ERROR : cant send sig to pid : <pid>`.

The server exits with an error if a sender can no longer be signalled. It
stops cleanly on Ctrl-C.

## Library

The package also holds the helpers that the programs are built on. You can use
them on their own.

- `minitalk.protocol` defines the wire format.
  - `encode_char` and `encode_message` turn bytes and text into lists of bits.
    `encode_message` rejects text that contains NUL.
  - `Decoder.feed` takes one bit at a time and returns each completed byte.
  - `parse_pid` reads a pid from a string and raises `ValueError` for one that
    reads as 0.
- `minitalk.server`: `Server`, with `handle_signal(signum, sender)` and `run()`.
- `minitalk.client`: `Client`, with `send_message(text)` and
  `handle_signal(signum)`. The function that sends signals can be passed in,
  which makes both classes usable without real processes.
- `minitalk.printf`: `sprintf` and `printf`.
  - They support `%c %s %p %d %i %u %x %X %%` with the flags `# +-0.` and a
    field width.
  - `FormatOptions` holds the parsed flags of one conversion.
- `minitalk.chars` handles characters and numbers as text:
  - `atoi` and `itoa` work with 32-bit wrap-around.
  - The `is*` tests and `tolower` and `toupper` accept a code or a
    one-character string.
- `minitalk.strings` holds string helpers: `strlen`, `strlcpy`, `strlcat`,
  `strchr`, `strrchr`, `strncmp`, `strnstr`, `strdup`, `substr`, `strjoin`,
  `strtrim`, `split`, `strmapi` and `striteri`.
- `minitalk.memory` holds byte-buffer helpers: `bzero`, `calloc`, `memset`,
  `memcpy`, `memmove`, `memchr` and `memcmp`.
- `minitalk.linkedlist` provides `LinkedList` and `Node`.
- `minitalk.linereader` provides `LineReader` and `get_next_line`. They read
  lines from file descriptors and keep a separate buffer for each descriptor.

```python
from minitalk.protocol import Decoder, encode_message

decoder = Decoder()
received = [b for b in map(decoder.feed, encode_message("hi")) if b is not None]
assert received == [ord("h"), ord("i"), 0]
```

## What it does not do

Messages are only written to the server's standard output. They are not stored
or logged, and the server sends no reply beyond the acknowledgement signals.
The server decodes one stream of bits at a time and does not tell concurrent
senders apart.