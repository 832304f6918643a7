import warnings

from utils.decorators import ReportGenerator

from .demo_controller import DemoController


class DecoratorController(DemoController):
    title = "Decorator"

    def run(self) -> None:
        self.print_header()
        report_service = ReportGenerator()

        self.print_separator()
        report_service.generate_sales_report(30)

        self.print_separator()
        # Предупреждение уже выведено в консоль
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", DeprecationWarning)
            report_service.generate_old_report()
