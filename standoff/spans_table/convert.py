import pandas as pd

from ..document import Document

COLUMNS = ["id", "type", "start", "end", "n_spans", "text", "doc_id"]


class Convert:
    def __init__(self, document: Document):
        self.document = document

    def __call__(self, id_prefix: str | None = None):
        """
        Build a spans table with one row per entity, ordered by text position.
        :param id_prefix: If given, assign a fresh span_id column with this prefix in table order
        """
        spans_df = self.build_dataframe()
        spans_df = spans_df.sort_values(by=["start", "end"], kind="stable").reset_index(drop=True)
        if id_prefix is not None:
            spans_df = self._assign_span_ids(spans_df, prefix=id_prefix)
        return spans_df

    def build_dataframe(self):
        span_dictionary = {column: [] for column in COLUMNS}
        for entity in self.document.get_entities():
            span_dictionary["id"].append(entity.id)
            span_dictionary["type"].append(entity.type)
            span_dictionary["start"].append(entity.begin)
            span_dictionary["end"].append(entity.end)
            span_dictionary["n_spans"].append(len(entity.spans))
            span_dictionary["text"].append(entity.text)
            span_dictionary["doc_id"].append(self.document.doc_id)
        return pd.DataFrame.from_dict(span_dictionary).astype({"start": "int64", "end": "int64", "n_spans": "int64"})

    @staticmethod
    def _assign_span_ids(inp_data: pd.DataFrame, prefix: str = "id"):
        """
        Assign IDs to entity spans using the given prefix.
        :param inp_data: Pandas dataframe with extracted spans
        :param prefix: IDs prefix
        """
        inp_data["span_id"] = [f"{prefix}{i + 1:06d}" for i in range(inp_data.shape[0])]
        return inp_data
