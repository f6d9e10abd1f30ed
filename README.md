# naiasocket

A small socket layer for games and other real-time programs that want
unreliable, unordered packets over UDP. A server listens on one UDP address
and exchanges packets with many clients. A client sends to and receives from
one server. Both sides can run incoming packets through a link conditioner,
which adds latency and jitter and drops packets, so you can see how your
program behaves on a poor connection.

## Install

```
pip install naiasocket
```

Python 3.10 or later. No third-party dependencies.

## Server

```python
from naiasocket.config import SocketConfig
from naiasocket.server_addrs import ServerAddrs
from naiasocket.server_socket import Socket

with Socket(SocketConfig()) as socket:
    socket.listen(ServerAddrs.default())
    sender = socket.packet_sender()
    receiver = socket.packet_receiver()

    while True:
        packet = receiver.receive()  # (address, payload), or None
        if packet is not None:
            address, payload = packet
            sender.send(address, payload)
```

The server socket binds to `session_listen_addr` of the `ServerAddrs` it is
given; `ServerAddrs.default()` uses `127.0.0.1:14191`. Addresses may be given
as `(host, port)` tuples or `"host:port"` strings. Two background threads do
the reading and writing; `receive()` never blocks. `local_addr()` returns the
address actually bound (useful after binding to port 0), and `close()` stops
the threads and closes the socket.

## Client

```python
from naiasocket.client_socket import Socket
from naiasocket.config import SocketConfig

with Socket(SocketConfig()) as socket:
    socket.connect("http://127.0.0.1:14191")
    sender = socket.packet_sender()
    receiver = socket.packet_receiver()

    sender.send(b"PING")
    payload = receiver.receive()  # bytes, or None when nothing has arrived
```

The server URL needs a scheme and a host, and must not have a path, query
string or fragment; without a port, `http` means 80 and `https` 443. The
client binds a non-blocking UDP socket to the address found by
`find_my_ip_address()`, or to `bind_address` if you pass one
(`Socket(config, bind_address="127.0.0.1")`).

`receive()` raises `naiasocket.errors.ClientSocketError` when a packet comes
from an address other than the server's, or when the socket reports an error.
Send failures are ignored. `receiver.server_addr()` returns a
`naiasocket.server_addr.ServerAddr`.

Asking either socket for its sender or receiver before `listen()` or
`connect()` raises `RuntimeError`, as does calling `listen()` or `connect()`
twice without `close()` in between.

## Simulating network conditions

```python
from naiasocket.config import LinkConditionerConfig, SocketConfig

config = SocketConfig(link_condition=LinkConditionerConfig.average_condition())
```

`LinkConditionerConfig` has three presets, `good_condition()`,
`average_condition()` and `poor_condition()`, or you can give
`incoming_latency` and `incoming_jitter` in milliseconds and `incoming_loss`
as a fraction between 0 and 1. `naiasocket.link_condition.process_packet`
applies a config to a single packet and a `TimeQueue`.

## Timing helpers

`naiasocket.timing` has `Instant`, a monotonic point in time with
`elapsed()`, `until()` and `add_millis()`; `Timer`, built from a
`timedelta`, which rings once that duration has passed since the last
`reset()`; and `Timestamp`, wall-clock seconds as an integer.
`naiasocket.time_queue.TimeQueue` holds items until their instant has come
and hands out the earliest first.

## Demo

Start the ping server in one terminal:

```
naiasocket-demo-server
```

and the client in another:

```
naiasocket-demo-client
```

The client sends `PING` once a second and the server answers `PONG`. The
client stops sending after ten replies. Both use the average link condition,
so some packets are delayed and a few are lost. The server takes
`--session-addr HOST:PORT` to listen elsewhere; the client takes the server
URL as an optional argument.

## What it does not do

Only plain UDP is supported. There are no WebRTC data channels, no session
signalling endpoint and no browser clients: the `webrtc_listen_addr` and
`public_webrtc_url` fields of `ServerAddrs` (and the server demo's
`--webrtc-addr` and `--public-url` options) are accepted and stored but not
used, and `SocketConfig.rtc_endpoint_path` has no effect. There is no
connection handling, reliability or ordering on top of the raw packets.