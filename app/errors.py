"""
Erros do pipeline de ingestão e geração de gráficos.

Cada erro carrega uma mensagem e um `kind`, usado pela API para
identificar a falha na resposta.
"""


class PipelineError(Exception):
    """Falha rotulada do pipeline, restrita a uma única requisição."""
    kind = "PipelineError"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class EmptySheetError(PipelineError):
    """A planilha não possui nenhuma linha."""
    kind = "EmptySheet"


class NoHeadersError(PipelineError):
    """A linha de cabeçalho está vazia."""
    kind = "NoHeaders"


class EmptyDatasetError(PipelineError):
    """Não há linhas para gerar o gráfico."""
    kind = "EmptyDataset"


class WorkbookReadError(PipelineError):
    """O arquivo enviado não pôde ser lido como planilha Excel."""
    kind = "InvalidWorkbook"
