from sqlalchemy import Column, DateTime, Integer, String, Text
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()


class GenerationLog(Base):
    __tablename__ = "generation_logs"

    id = Column(Integer, primary_key=True)
    mode = Column(String(32), nullable=False)       # generate | parse | merge
    prompt = Column(Text, nullable=False)
    status = Column(String(16), nullable=False)
    message = Column(Text)
    output = Column(Text)                           # merged diagram as JSON
    node_count = Column(Integer, default=0)
    edge_count = Column(Integer, default=0)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
