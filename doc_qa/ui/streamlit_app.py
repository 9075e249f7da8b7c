import streamlit as st
from datetime import datetime, timezone

from doc_qa.ui.client import DocumentQAClient, DocumentQAClientError
from doc_qa.ui.messages import pop_messages, queue_message

st.set_page_config(layout="wide", page_title="Multilingual Document QA")

client = DocumentQAClient()

VIEWS = ["💬 Chat", "📄 Page Viewer"]


# --- Initialize session state variables ---
def init_session_state():
    if "documents" not in st.session_state:
        st.session_state.documents = []
    if "chat_history" not in st.session_state:  # append-only list of exchanges
        st.session_state.chat_history = []
    if "selected_page" not in st.session_state:
        st.session_state.selected_page = None
    if "page_text" not in st.session_state:
        st.session_state.page_text = None
    if "translated_text" not in st.session_state:
        st.session_state.translated_text = None
    if "view" not in st.session_state:
        st.session_state.view = VIEWS[0]


def fetch_documents():
    try:
        st.session_state.documents = client.list_documents()
    except DocumentQAClientError as e:
        queue_message(st.session_state, "error",
                      f"Failed to fetch documents. Make sure the backend is running! ({e.message})")


def view_page(document_id, page_number, filename):
    st.session_state.selected_page = {"document_id": document_id, "page_number": page_number, "filename": filename}
    st.session_state.page_text = None
    st.session_state.translated_text = None
    # The view radio is already rendered; switch on the next run.
    st.session_state.pending_view = VIEWS[1]
    try:
        st.session_state.page_text = client.get_page(document_id, page_number)["text"]
    except DocumentQAClientError as e:
        queue_message(st.session_state, "error", f"Failed to load page: {e.message}")


init_session_state()
if not st.session_state.documents:
    fetch_documents()

# --- Sidebar: Document management ---
with st.sidebar:
    st.header("📁 Documents")

    uploaded_files = st.file_uploader(
        "Upload PDFs",
        type=["pdf"],
        accept_multiple_files=True,
        key="file_uploader_widget"
    )
    if uploaded_files and st.button("📤 Upload PDFs"):
        with st.spinner("Extracting text..."):
            for uploaded_file in uploaded_files:
                try:
                    data = client.upload(uploaded_file.name, uploaded_file.getvalue())
                    st.success(f"✅ Uploaded: {data['filename']} ({data['pages']} pages)")
                except DocumentQAClientError as e:
                    st.error(f"❌ Upload failed for {uploaded_file.name}: {e.message}")
        fetch_documents()

    st.markdown("---")
    if not st.session_state.documents:
        st.caption("No documents uploaded yet")
    for doc in st.session_state.documents:
        col_info, col_delete = st.columns([5, 1])
        with col_info:
            st.markdown(f"**📄 {doc['filename']}**")
            st.caption(f"Pages: {doc['pages']} | {doc['size_mb']} MB | ID: {doc['id'][:12]}...")
        with col_delete:
            if st.button("🗑️", key=f"delete_{doc['id']}"):
                try:
                    client.delete(doc["id"])
                    queue_message(st.session_state, "success", "Document deleted!")
                except DocumentQAClientError as e:
                    queue_message(st.session_state, "error", f"Delete failed: {e.message}")
                fetch_documents()
                st.rerun()

    if st.button("🔄 Refresh"):
        fetch_documents()
        st.rerun()

# --- Main Area ---
st.title("📚 Multilingual Document QA")
st.caption("Upload PDFs in any Indian language and ask questions in English!")

for level, text in pop_messages(st.session_state):
    getattr(st, level)(text)

if st.session_state.get("pending_view"):
    st.session_state.view = st.session_state.pop("pending_view")

view = st.radio("View", VIEWS, key="view", horizontal=True, label_visibility="collapsed")

if view == VIEWS[0]:
    documents_by_id = {doc["id"]: doc["filename"] for doc in st.session_state.documents}
    selected_docs = st.multiselect(
        "Search in documents (leave empty for all):",
        options=list(documents_by_id),
        format_func=lambda doc_id: documents_by_id.get(doc_id, doc_id)
    )

    if not st.session_state.chat_history:
        st.info("👋 Upload documents and ask questions about them. The answer will include page citations.")

    for index, exchange in enumerate(st.session_state.chat_history):
        with st.chat_message("user"):
            st.markdown(exchange["question"])
        with st.chat_message("assistant"):
            st.markdown(exchange["answer"])
            if exchange["sources"]:
                st.caption("📚 Sources:")
                for source_index, source in enumerate(exchange["sources"]):
                    label = f"📄 {source['filename']} - Page {source['page_number']}"
                    if st.button(label, key=f"source_{index}_{source_index}",
                                 disabled=source.get("document_id") is None):
                        view_page(source["document_id"], source["page_number"], source["filename"])
                        st.rerun()

    question = st.chat_input("Ask a question about your documents...")
    if question:
        if not st.session_state.documents:
            st.warning("Please upload documents first!")
        else:
            with st.spinner("Thinking..."):
                try:
                    data = client.ask(question, selected_docs or None)
                    st.session_state.chat_history.append({
                        "question": question,
                        "answer": data["answer"],
                        "sources": data.get("sources", []),
                        "timestamp": datetime.now(timezone.utc).isoformat()
                    })
                    st.rerun()
                except DocumentQAClientError as e:
                    st.error(f"Error: {e.message}")

else:
    page = st.session_state.selected_page
    if page is None:
        st.info("Click on a source in the chat to view the page.")
    else:
        st.subheader(f"📄 {page['filename']} - Page {page['page_number']}")
        col_original, col_translated = st.columns(2)
        with col_original:
            st.markdown("**Original Text:**")
            st.text(st.session_state.page_text or "")
            if st.session_state.page_text and st.button("🌐 Translate to English"):
                with st.spinner("Translating..."):
                    try:
                        data = client.translate(st.session_state.page_text, "en")
                        st.session_state.translated_text = data["translated"]
                    except DocumentQAClientError as e:
                        st.error(f"Translation failed: {e.message}")
        with col_translated:
            if st.session_state.translated_text:
                st.markdown("**English Translation:**")
                st.text(st.session_state.translated_text)
