"""Holds the repositories of the application and their starting data."""

from __future__ import annotations

from datetime import datetime

from tutoring.client import Client
from tutoring.client_type import SecondarySchool
from tutoring.lesson import Lesson
from tutoring.repositories import ClientRepository, LessonRepository, TeacherRepository
from tutoring.teacher import Teacher


class RepositoriesManager:
    """The client, teacher and lesson repositories, filled with sample data."""

    def __init__(self) -> None:
        self.client_repository = ClientRepository()
        self.teacher_repository = TeacherRepository()
        self.lesson_repository = LessonRepository()
        self.initialize_test_data()

    def initialize_test_data(self) -> None:
        """Add a sample client, teacher and a lesson between them."""
        client = Client("Jan", 1, 3, SecondarySchool())
        self.client_repository.add(client)

        teacher = Teacher("Artur", 60, 1)
        self.teacher_repository.add(teacher)

        lesson = Lesson(1, datetime(2024, 6, 26, 14, 20), 1, "Math", client, teacher)
        self.lesson_repository.add(lesson)

        client.add_lesson(lesson)