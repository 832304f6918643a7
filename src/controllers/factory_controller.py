from services.notifications import NotificationFactory, NotificationType

from .demo_controller import DemoController


class FactoryController(DemoController):
    title = "Factory"

    def run(self) -> None:
        self.print_header()

        email_notifier = NotificationFactory.create_notification(NotificationType.EMAIL)
        email_notifier.send("Hello, this is a test email.")

        sms_notifier = NotificationFactory.create_notification("sms")
        sms_notifier.send("Your verification code is 12345.")

        push_notifier = NotificationFactory.create_notification("push")
        push_notifier.send("New article has been published!")

        print("\nClient code does not depend on concrete classes like EmailNotification or SMSNotification.")
