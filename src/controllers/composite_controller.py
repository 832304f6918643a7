from typing import Optional

from models.domain.file_system import Directory, File

from .demo_controller import DemoController


class CompositeController(DemoController):
    """Дерево файловой системы: файлы и директории обрабатываются одинаково."""

    title = "Composite"

    documents: Optional[Directory] = None
    report: Optional[File] = None

    def build_tree(self) -> Directory:
        """Build the sample tree; keeps the nodes the demo reports on."""
        root = Directory("root")
        documents = Directory("documents")
        pictures = Directory("pictures")
        root.add(documents)
        root.add(pictures)

        report = File("report.docx", 120)
        documents.add(report)
        documents.add(File("proposal.pdf", 250))

        vacation = Directory("vacation")
        pictures.add(File("photo1.jpg", 2048))
        pictures.add(File("photo2.png", 1536))
        pictures.add(vacation)

        vacation.add(File("beach.jpg", 3072))

        self.documents = documents
        self.report = report
        return root

    def run(self) -> None:
        self.print_header()

        root = self.build_tree()
        for line in root.list():
            print(line)

        self.print_separator()

        print(f"Size of '{self.report.name}': {self.report.get_size()} KB")
        print(f"Total size of '{self.documents.name}' directory: {self.documents.get_size()} KB")
        print(f"Total size of '{root.name}' directory: {root.get_size()} KB")
