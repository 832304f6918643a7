from services.events import EmailNotifier, NewsReader, Subject

from .demo_controller import DemoController


class ObserverController(DemoController):
    title = "Observer"

    def run(self) -> None:
        self.print_header()

        news_publisher = Subject()
        reader_a = NewsReader("Reader A")
        reader_b = NewsReader("Reader B")
        email_system = EmailNotifier()

        news_publisher.subscribe(reader_a)
        news_publisher.subscribe(reader_b)
        news_publisher.subscribe(email_system)

        self.print_separator()
        news_publisher.notify("Python Design Patterns Released!")

        self.print_separator()
        news_publisher.unsubscribe(reader_b)

        self.print_separator()
        news_publisher.notify("The Power of Protocols in Python")
