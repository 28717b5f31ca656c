"""
HTML Template
=============

HTML template for the web interface.
"""

HTML_TEMPLATE = """
<!doctype html>
<html lang="pt-BR">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Progress Photo Tracker</title>
    <style>
      * {
        box-sizing: border-box;
      }
      body {
        font-family: 'Segoe UI', system-ui, -apple-system, sans-serif;
        margin: 0;
        min-height: 100vh;
        background: #0f172a;
        color: #e2e8f0;
        display: flex;
        justify-content: center;
        padding: 1rem;
      }
      .panel {
        background: #1e293b;
        padding: 2rem;
        border-radius: 18px;
        box-shadow: 0 20px 45px rgba(15, 23, 42, 0.45);
        width: min(1100px, 100%);
      }
      h1 {
        margin: 0 0 0.25rem;
        font-size: 1.8rem;
        color: #f8fafc;
      }
      h2 {
        font-size: 1.2rem;
        color: #f8fafc;
      }
      .subtitle {
        color: #94a3b8;
        margin-bottom: 1.5rem;
      }
      .buttons, .controls {
        margin-bottom: 1rem;
        display: flex;
        gap: 0.75rem;
        flex-wrap: wrap;
        align-items: center;
      }
      button {
        border: none;
        outline: none;
        padding: 0.65rem 1.3rem;
        border-radius: 999px;
        font-size: 0.95rem;
        font-weight: 600;
        cursor: pointer;
        transition: transform 0.15s ease, background 0.15s ease;
        background: #4c1d95;
        color: #f8fafc;
      }
      button:hover {
        transform: translateY(-1px);
      }
      button.active {
        background: #ec4899;
        transform: translateY(-2px);
      }
      button:disabled {
        opacity: 0.5;
        cursor: wait;
      }
      input, select {
        background: #020617;
        color: #e2e8f0;
        border: 1px solid #334155;
        border-radius: 8px;
        padding: 0.5rem 0.75rem;
      }
      .view {
        display: none;
      }
      .view.active {
        display: block;
      }
      .grid {
        display: grid;
        grid-template-columns: repeat(auto-fill, minmax(200px, 1fr));
        gap: 1rem;
      }
      .card {
        background: #020617;
        border: 1px solid #334155;
        border-radius: 12px;
        overflow: hidden;
      }
      .card img {
        width: 100%;
        height: 220px;
        object-fit: cover;
        display: block;
      }
      .card .body {
        padding: 0.75rem;
        font-size: 0.9rem;
      }
      .stats {
        display: grid;
        grid-template-columns: repeat(4, 1fr);
        gap: 1rem;
        margin-bottom: 1rem;
      }
      .stat {
        background: #020617;
        border-radius: 12px;
        padding: 1rem;
        text-align: center;
      }
      .stat strong {
        display: block;
        font-size: 1.8rem;
        color: #f8fafc;
      }
      .muted {
        color: #94a3b8;
      }
      .loss {
        color: #22c55e;
      }
      .gain {
        color: #f59e0b;
      }
      .status {
        color: #22c55e;
        margin-top: 0.75rem;
      }
      .status.error {
        color: #ef4444;
      }
      progress {
        width: 100%;
      }
      @media (max-width: 640px) {
        .panel {
          padding: 1rem;
        }
        h1 {
          font-size: 1.4rem;
        }
        .stats {
          grid-template-columns: repeat(2, 1fr);
        }
        button {
          padding: 0.5rem 1rem;
          font-size: 0.85rem;
        }
      }
    </style>
  </head>
  <body>
    <div class="panel">
      <h1>Minha Transformação</h1>
      <p class="subtitle">Registre fotos de progresso, compare e gere um vídeo da sua evolução.</p>
      <div class="buttons">
        <button data-view="upload" class="active">Upload</button>
        <button data-view="gallery">Galeria</button>
        <button data-view="compare">Comparar</button>
        <button data-view="timeline">Timeline</button>
        <button data-view="video">Vídeo</button>
      </div>

      <section id="upload" class="view active">
        <h2>Enviar fotos</h2>
        <div class="controls">
          <input id="upload-files" type="file" accept="image/*" multiple />
          <input id="upload-date" type="date" />
          <select id="upload-type">
            <option value="front">Frente</option>
            <option value="profile">Perfil</option>
            <option value="back">Costas</option>
            <option value="free-pose">Pose livre</option>
          </select>
          <input id="upload-weight" type="number" step="0.1" placeholder="Peso (kg)" />
          <input id="upload-notes" type="text" placeholder="Observações" />
          <button id="upload-submit">Salvar</button>
        </div>
      </section>

      <section id="gallery" class="view">
        <div class="controls">
          <select id="filter-type">
            <option value="all">Todos os tipos</option>
            <option value="front">Frente</option>
            <option value="profile">Perfil</option>
            <option value="back">Costas</option>
            <option value="free-pose">Pose livre</option>
          </select>
          <select id="filter-period">
            <option value="all">Todo o período</option>
            <option value="7">Últimos 7 dias</option>
            <option value="30">Últimos 30 dias</option>
            <option value="90">Últimos 90 dias</option>
          </select>
          <input id="filter-search" type="text" placeholder="Buscar nas observações" />
        </div>
        <div id="gallery-grid" class="grid"></div>
      </section>

      <section id="compare" class="view">
        <div class="controls">
          <select id="compare-before"></select>
          <select id="compare-after"></select>
          <button id="compare-submit">Comparar</button>
        </div>
        <div id="compare-result"></div>
      </section>

      <section id="timeline" class="view">
        <div id="timeline-stats" class="stats"></div>
        <div id="timeline-entries"></div>
      </section>

      <section id="video" class="view">
        <div class="controls">
          <label>Segundos por foto <input id="video-duration" type="number" step="0.5" min="0.5" value="2" /></label>
          <select id="video-transition">
            <option value="fade">Fade</option>
            <option value="slide">Deslizar</option>
            <option value="none">Sem transição</option>
          </select>
          <select id="video-quality">
            <option value="720p">720p (HD)</option>
            <option value="1080p">1080p (Full HD)</option>
            <option value="480p">480p (SD)</option>
          </select>
          <select id="video-type">
            <option value="all">Todos os tipos</option>
            <option value="front">Frente</option>
            <option value="profile">Perfil</option>
            <option value="back">Costas</option>
            <option value="free-pose">Pose livre</option>
          </select>
          <label><input id="video-stats" type="checkbox" checked /> Data e peso</label>
          <label><input id="video-music" type="checkbox" /> Música</label>
          <button id="video-submit">Gerar vídeo</button>
        </div>
        <progress id="video-progress" max="100" value="0" hidden></progress>
        <div class="buttons">
          <button id="video-download" hidden>Baixar</button>
          <button id="video-share" hidden>Compartilhar</button>
        </div>
      </section>

      <div id="status" class="status"></div>
    </div>
    <script>
      const status = document.getElementById('status');
      let videoBlob = null;
      let videoName = 'transformacao.mp4';

      function notify(message, isError) {
        status.textContent = message;
        status.className = isError ? 'status error' : 'status';
      }

      function fmtDate(iso) {
        return new Date(iso).toLocaleDateString('pt-BR', { timeZone: 'UTC' });
      }

      function fmtKg(value, signed) {
        if (value === null || value === undefined) return '—';
        const sign = signed && value > 0 ? '+' : '';
        return sign + value.toFixed(1) + 'kg';
      }

      async function api(method, url, body) {
        const options = { method, headers: {} };
        if (body !== undefined) {
          options.headers['Content-Type'] = 'application/json';
          options.body = JSON.stringify(body);
        }
        const response = await fetch(url, options);
        if (!response.ok) {
          let message = response.statusText;
          try { message = (await response.json()).message; } catch (e) {}
          throw new Error(message);
        }
        return response;
      }

      function fileToDataUri(file) {
        return new Promise((resolve, reject) => {
          const reader = new FileReader();
          reader.onload = () => resolve(reader.result);
          reader.onerror = () => reject(reader.error);
          reader.readAsDataURL(file);
        });
      }

      document.querySelectorAll('[data-view]').forEach((button) => {
        button.addEventListener('click', () => show(button.dataset.view));
      });

      function show(view) {
        document.querySelectorAll('[data-view]').forEach((b) => b.classList.toggle('active', b.dataset.view === view));
        document.querySelectorAll('.view').forEach((s) => s.classList.toggle('active', s.id === view));
        if (view === 'gallery') loadGallery();
        if (view === 'compare') loadCompareOptions();
        if (view === 'timeline') loadTimeline();
      }

      // Upload: one request per file, in selection order
      const uploadButton = document.getElementById('upload-submit');
      uploadButton.addEventListener('click', async () => {
        const files = Array.from(document.getElementById('upload-files').files)
          .filter((file) => file.type.startsWith('image/'));
        const day = document.getElementById('upload-date').value;
        if (!files.length || !day) {
          notify('Selecione ao menos uma imagem e a data.', true);
          return;
        }
        const weight = document.getElementById('upload-weight').value;
        const notes = document.getElementById('upload-notes').value;
        uploadButton.disabled = true;
        try {
          for (const file of files) {
            const fileData = await fileToDataUri(file);
            await api('POST', '/api/photos', {
              date: new Date(day).toISOString(),
              type: document.getElementById('upload-type').value,
              weight: weight ? parseFloat(weight) : null,
              notes: notes || null,
              filename: file.name,
              fileData,
            });
          }
          notify(files.length + ' foto(s) enviada(s).');
        } catch (error) {
          notify('Erro ao enviar: ' + error.message, true);
        } finally {
          uploadButton.disabled = false;
        }
      });

      // Gallery
      ['filter-type', 'filter-period', 'filter-search'].forEach((id) => {
        document.getElementById(id).addEventListener('input', loadGallery);
      });

      async function loadGallery() {
        const params = new URLSearchParams({
          type: document.getElementById('filter-type').value,
          period: document.getElementById('filter-period').value,
          search: document.getElementById('filter-search').value,
        });
        const grid = document.getElementById('gallery-grid');
        try {
          const data = await (await api('GET', '/api/gallery?' + params)).json();
          grid.innerHTML = '';
          if (!data.photos.length) {
            grid.innerHTML = '<p class="muted">Nenhuma foto encontrada.</p>';
            return;
          }
          for (const photo of data.photos) {
            const card = document.createElement('div');
            card.className = 'card';
            card.innerHTML = `<img alt="Foto de progresso ${photo.type}" />
              <div class="body">
                <div>${fmtDate(photo.date)} · ${photo.type}</div>
                <div>${photo.weight !== null ? fmtKg(photo.weight) : ''}
                  <span class="muted">${photo.weightChangeLabel || ''}</span></div>
                <button>Excluir</button>
              </div>`;
            card.querySelector('img').src = photo.fileData;
            card.querySelector('button').addEventListener('click', () => removePhoto(photo.id));
            grid.appendChild(card);
          }
        } catch (error) {
          notify('Erro ao carregar a galeria: ' + error.message, true);
        }
      }

      async function removePhoto(id) {
        if (!window.confirm('Tem certeza que deseja excluir esta foto?')) return;
        try {
          await api('DELETE', '/api/photos/' + id);
          notify('Foto excluída.');
          loadGallery();
        } catch (error) {
          notify('Não foi possível excluir a foto.', true);
        }
      }

      // Comparison
      async function loadCompareOptions() {
        const photos = await (await api('GET', '/api/photos')).json();
        for (const id of ['compare-before', 'compare-after']) {
          const select = document.getElementById(id);
          select.innerHTML = '';
          for (const photo of photos) {
            const option = document.createElement('option');
            option.value = photo.id;
            option.textContent = `${fmtDate(photo.date)} - ${photo.type}` + (photo.weight !== null ? ` (${photo.weight} kg)` : '');
            select.appendChild(option);
          }
        }
      }

      document.getElementById('compare-submit').addEventListener('click', async () => {
        const params = new URLSearchParams({
          before: document.getElementById('compare-before').value,
          after: document.getElementById('compare-after').value,
        });
        const target = document.getElementById('compare-result');
        try {
          const data = await (await api('GET', '/api/compare?' + params)).json();
          const m = data.metrics;
          const cls = m.weightChange !== null && m.weightChange < 0 ? 'loss' : 'gain';
          target.innerHTML = `<div class="grid">
              <div class="card"><img id="cmp-before" /><div class="body">Antes · ${fmtDate(data.before.date)}</div></div>
              <div class="card"><img id="cmp-after" /><div class="body">Depois · ${fmtDate(data.after.date)}</div></div>
            </div>
            <p>Mudança de peso: <span class="${cls}">${fmtKg(m.weightChange, true)}</span></p>
            <p>Período: ${m.daysDiff} dias</p>
            <p>Taxa semanal: ${fmtKg(m.weeklyRate, true)}</p>`;
          document.getElementById('cmp-before').src = data.before.fileData;
          document.getElementById('cmp-after').src = data.after.fileData;
        } catch (error) {
          notify('Erro ao comparar: ' + error.message, true);
        }
      });

      // Timeline
      async function loadTimeline() {
        try {
          const data = await (await api('GET', '/api/timeline')).json();
          const s = data.stats;
          document.getElementById('timeline-stats').innerHTML = `
            <div class="stat"><strong>${s.totalPhotos}</strong>Fotos</div>
            <div class="stat"><strong>${fmtKg(s.weightLoss)}</strong>Peso perdido</div>
            <div class="stat"><strong>${s.daysSince === null ? '—' : s.daysSince}</strong>Dias</div>
            <div class="stat"><strong>${fmtKg(s.avgWeekly)}</strong>Média semanal</div>`;
          const list = document.getElementById('timeline-entries');
          list.innerHTML = '';
          for (const entry of data.entries) {
            const p = entry.photo;
            const change = entry.weightChange;
            const cls = change === null ? 'muted' : change < 0 ? 'loss' : change > 0 ? 'gain' : 'muted';
            const row = document.createElement('p');
            row.innerHTML = `<strong>${fmtDate(p.date)}</strong> · ${entry.isBaseline ? 'Baseline' : p.type}
              ${p.weight !== null ? ' · ' + fmtKg(p.weight) : ''}
              ${change !== null ? `<span class="${cls}">(${fmtKg(change, true)})</span>` : ''}`;
            list.appendChild(row);
          }
        } catch (error) {
          notify('Erro ao carregar a timeline: ' + error.message, true);
        }
      }

      // Video
      const videoButton = document.getElementById('video-submit');
      const videoProgress = document.getElementById('video-progress');
      videoButton.addEventListener('click', async () => {
        videoButton.disabled = true;
        videoProgress.hidden = false;
        videoProgress.removeAttribute('value');
        try {
          const response = await api('POST', '/api/video', {
            duration: parseFloat(document.getElementById('video-duration').value),
            transition: document.getElementById('video-transition').value,
            quality: document.getElementById('video-quality').value,
            photoType: document.getElementById('video-type').value,
            includeStats: document.getElementById('video-stats').checked,
            includeMusic: document.getElementById('video-music').checked,
          });
          videoBlob = await response.blob();
          const match = /filename=([^;]+)/.exec(response.headers.get('Content-Disposition') || '');
          if (match) videoName = match[1];
          videoProgress.value = 100;
          document.getElementById('video-download').hidden = false;
          document.getElementById('video-share').hidden = false;
          notify('Vídeo gerado com sucesso!');
        } catch (error) {
          videoBlob = null;
          notify('Erro ao gerar vídeo: ' + error.message, true);
        } finally {
          videoButton.disabled = false;
        }
      });

      document.getElementById('video-download').addEventListener('click', () => {
        if (!videoBlob) return;
        const url = URL.createObjectURL(videoBlob);
        const link = document.createElement('a');
        link.href = url;
        link.download = videoName;
        link.click();
        URL.revokeObjectURL(url);
      });

      document.getElementById('video-share').addEventListener('click', async () => {
        if (!videoBlob) return;
        const file = new File([videoBlob], videoName, { type: videoBlob.type });
        if (!navigator.share || (navigator.canShare && !navigator.canShare({ files: [file] }))) {
          notify('Seu navegador não suporta compartilhamento direto. Use o botão de download.', true);
          return;
        }
        try {
          await navigator.share({ files: [file], title: 'Minha transformação' });
        } catch (error) {
          notify('Não foi possível compartilhar o vídeo.', true);
        }
      });
    </script>
  </body>
</html>
"""
