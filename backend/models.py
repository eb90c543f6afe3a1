# models.py
from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Table, Text
from sqlalchemy.orm import relationship
from db import Base

trivia_question = Table(
    "trivia_question",
    Base.metadata,
    Column("trivias_id", Integer, ForeignKey("trivias.id", ondelete="CASCADE"), primary_key=True),
    Column("questions_id", Integer, ForeignKey("questions.id", ondelete="CASCADE"), primary_key=True),
)

class Trivia(Base):
    __tablename__ = "trivias"

    id = Column(Integer, primary_key=True, index=True)
    start = Column(DateTime, nullable=False)   # naive UTC
    duration = Column(Integer, nullable=False)
    level = Column(Integer, nullable=False)    # 1..10

    questions = relationship("Question", secondary=trivia_question)

    def __repr__(self):
        return f"Trivia(id={self.id}, start={self.start}, duration={self.duration}, level={self.level})"

class Question(Base):
    __tablename__ = "questions"

    id = Column(Integer, primary_key=True, index=True)
    question = Column(Text, nullable=False)
    answer1 = Column(String(512), nullable=False)
    answer2 = Column(String(512), nullable=False)
    answer3 = Column(String(512), nullable=False)
    answer4 = Column(String(512), nullable=False)
    correct_answer = Column(Integer, nullable=False)  # 1..4
    time = Column(Integer)                            # seconds allowed, optional

    # Trivia owns the link; this side is read-only
    trivias = relationship("Trivia", secondary=trivia_question, viewonly=True)
    answers = relationship("ClientAnswer", back_populates="question", cascade="all, delete-orphan")

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    login = Column(String(100), unique=True, index=True, nullable=False)

    answers = relationship("ClientAnswer", back_populates="user", cascade="all, delete-orphan")

class ClientAnswer(Base):
    __tablename__ = "client_answers"

    id = Column(Integer, primary_key=True, index=True)
    correct = Column(Boolean, nullable=False)
    time = Column(Integer, nullable=False)
    question_id = Column(Integer, ForeignKey("questions.id", ondelete="CASCADE"), index=True, nullable=False)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False)

    question = relationship("Question", back_populates="answers")
    user = relationship("User", back_populates="answers")
