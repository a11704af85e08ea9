"""
Basic usage - Register listeners and emit events
"""
from eventchannel import EventChannel


def on_message(sender, text):
    print(f"{sender}: {text}")


def main():
    channel = EventChannel()

    # Chain registrations
    channel.on('message', on_message).on('message', lambda sender, text: print(f"  ({len(text)} chars)"))

    channel.emit('message', 'alice', 'hello')
    channel.emit('message', 'bob', 'hi there')

    # No listeners registered for this event
    if not channel.emit('typing', 'alice'):
        print("Nobody listens to 'typing'")


if __name__ == "__main__":
    main()
