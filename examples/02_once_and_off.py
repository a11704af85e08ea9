"""
Once-listeners, removal and listener limits
"""
import logging

from eventchannel import ChannelConfig, EventChannel, ListenerLimitError, setup_logging


def on_connect(host):
    print(f"Connected to {host}")


def on_first_connect(host):
    print(f"First connection to {host}, running setup")


def main():
    logging.basicConfig(level=logging.DEBUG)
    setup_logging(logging.DEBUG)

    channel = EventChannel(ChannelConfig(max_listeners=3))
    channel.on('connect', on_connect).once('connect', on_first_connect)

    channel.emit('connect', 'example.org')  # both listeners
    channel.emit('connect', 'example.org')  # on_connect only

    # Remove the last registration of on_connect
    channel.off('connect', on_connect)
    print(f"Listeners left: {channel.events['connect']}")

    try:
        for _ in range(4):
            channel.on('tick', print)
    except ListenerLimitError as e:
        print(f"Limit hit: {e}")

    channel.all_off('tick')
    print(f"'tick' registered: {'tick' in channel.events}")


if __name__ == "__main__":
    main()
